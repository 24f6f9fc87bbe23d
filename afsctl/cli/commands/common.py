import click

from afsctl.models.settings import OpenAFSSettings
from afsctl.openafs.dispatcher import Notifier
from afsctl.services.openafs_service import OpenAFSService


def make_service(
    ctx: click.Context,
    notifier: Notifier | None = None,
) -> OpenAFSService:
    """Build the service from the options stored on the CLI group.
    """
    obj = ctx.find_root().obj or {}
    return OpenAFSService(
        settings=obj.get('settings') or OpenAFSSettings(),
        runner=obj.get('runner'),
        notifier=notifier,
    )
