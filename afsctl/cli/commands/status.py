import asyncio

import click

from afsctl.cli.commands.common import make_service
from afsctl.openafs.formatters import format_status, format_token_status
from afsctl.openafs.models import ControlState, SystemStatus


@click.command('status')
@click.option(
    '--json',
    'as_json',
    is_flag=True,
    help='Print the status snapshot as JSON.',
)
@click.pass_context
def status(ctx: click.Context, as_json: bool) -> None:
    """Show client, token and autostart status.
    """
    async def _status() -> tuple[SystemStatus, ControlState]:
        service = make_service(ctx)
        snapshot = await service.refresh()
        return snapshot, service.controls

    snapshot, controls = asyncio.run(_status())

    if as_json:
        click.echo(snapshot.model_dump_json(indent=2))
    else:
        click.echo(format_status(snapshot, controls))


@click.command('tokens')
@click.pass_context
def tokens(ctx: click.Context) -> None:
    """List the AFS tokens held by the cache manager.
    """
    async def _tokens() -> SystemStatus:
        service = make_service(ctx)
        return await service.refresh()

    snapshot = asyncio.run(_tokens())
    if snapshot.tokens_error:
        click.echo('Error: could not run the tokens command', err=True)
        ctx.exit(1)

    click.echo(format_token_status(snapshot))


@click.command('watch')
@click.option(
    '--count',
    type=click.IntRange(min=1),
    default=None,
    help='Stop after this many status updates.',
)
@click.pass_context
def watch(ctx: click.Context, count: int | None) -> None:
    """Poll the status until interrupted.
    """
    async def _watch() -> None:
        service = make_service(ctx)
        done = asyncio.Event()
        seen = 0

        def _print(snapshot: SystemStatus, controls: ControlState) -> None:
            nonlocal seen
            click.echo(format_status(snapshot, controls))
            click.echo('')
            seen += 1
            if count is not None and seen >= count:
                done.set()

        service.start_monitoring(_print)
        try:
            await done.wait()
        finally:
            service.close()

    try:
        asyncio.run(_watch())
    except KeyboardInterrupt:
        pass
