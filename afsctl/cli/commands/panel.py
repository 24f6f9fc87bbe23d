import click

from afsctl.models.settings import OpenAFSSettings
from afsctl.tui.app import AfsctlApp


@click.command('panel')
@click.pass_context
def panel(ctx: click.Context) -> None:
    """Open the interactive status panel.
    """
    obj = ctx.find_root().obj or {}
    app = AfsctlApp(
        settings=obj.get('settings') or OpenAFSSettings(),
        runner=obj.get('runner'),
    )
    app.run()
