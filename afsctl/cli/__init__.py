import logging

import click
from pydantic import ValidationError

from afsctl.cli.commands.control import autostart, start, stop
from afsctl.cli.commands.panel import panel
from afsctl.cli.commands.status import status, tokens, watch
from afsctl.config import setup_logger
from afsctl.constants import PollingConfig
from afsctl.models.settings import OpenAFSSettings


@click.group()
@click.option(
    '--unit',
    envvar='AFSCTL_UNIT',
    default=PollingConfig.DEFAULT_UNIT_NAME,
    show_default=True,
    help='Systemd unit of the OpenAFS client.',
)
@click.option(
    '--interval',
    envvar='AFSCTL_INTERVAL',
    type=click.FloatRange(min=0, min_open=True),
    default=PollingConfig.DEFAULT_INTERVAL,
    show_default=True,
    help='Seconds between status polls.',
)
@click.option('-v', '--verbose', is_flag=True, help='Log debug messages.')
@click.pass_context
def cli(ctx: click.Context, unit: str, interval: float, verbose: bool) -> None:
    """afsctl - Monitor and control the OpenAFS client.
    """
    ctx.ensure_object(dict)
    logging.getLogger('afsctl').setLevel(
        logging.DEBUG if verbose else logging.INFO
    )
    try:
        ctx.obj['settings'] = OpenAFSSettings(
            unit_name=unit,
            poll_interval=interval,
        )
    except ValidationError as e:
        raise click.UsageError(f'Invalid settings: {e}')


cli.add_command(status)
cli.add_command(tokens)
cli.add_command(watch)
cli.add_command(start)
cli.add_command(stop)
cli.add_command(autostart)
cli.add_command(panel)


def run_cli() -> None:
    """Run the CLI interface.
    """
    setup_logger(logging.INFO)

    cli()


__all__ = [
    'cli',
    'run_cli',
]
