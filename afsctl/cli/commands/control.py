import asyncio

import click

from afsctl.cli.commands.common import make_service
from afsctl.openafs.models import ActionResult
from afsctl.openafs.types import ActionRequest


def run_action(ctx: click.Context, request: ActionRequest | None) -> None:
    """Dispatch an action and report its result.

    A request of None toggles autostart.
    """
    async def _dispatch() -> ActionResult:
        service = make_service(ctx)
        if request is None:
            return await service.toggle_autostart()
        return await service.dispatch(request)

    result = asyncio.run(_dispatch())
    if not result.success:
        click.echo(f'Error: {result.message}', err=True)
        ctx.exit(1)

    click.echo(result.message)


@click.command('start')
@click.pass_context
def start(ctx: click.Context) -> None:
    """Start the OpenAFS client.
    """
    run_action(ctx, ActionRequest.START_CLIENT)


@click.command('stop')
@click.pass_context
def stop(ctx: click.Context) -> None:
    """Stop the OpenAFS client.
    """
    run_action(ctx, ActionRequest.STOP_CLIENT)


@click.group('autostart')
def autostart() -> None:
    """Control whether the client starts at boot.
    """


@autostart.command('enable')
@click.pass_context
def enable(ctx: click.Context) -> None:
    """Enable autostart (requires pkexec authorization).
    """
    run_action(ctx, ActionRequest.ENABLE_AUTOSTART)


@autostart.command('disable')
@click.pass_context
def disable(ctx: click.Context) -> None:
    """Disable autostart (requires pkexec authorization).
    """
    run_action(ctx, ActionRequest.DISABLE_AUTOSTART)


@autostart.command('toggle')
@click.pass_context
def toggle(ctx: click.Context) -> None:
    """Flip autostart based on its current state.
    """
    run_action(ctx, None)
