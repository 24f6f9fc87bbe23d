from textual.app import App

from afsctl.models.settings import OpenAFSSettings
from afsctl.openafs.models import Notification
from afsctl.process.interfaces import CommandRunner
from afsctl.services.openafs_service import OpenAFSService
from afsctl.tui.screens.status_panel import StatusPanelScreen


class AfsctlApp(App[None]):
    """A textual application showing the OpenAFS client status.
    """

    TITLE = 'OpenAFS Status'

    def __init__(
        self,
        settings: OpenAFSSettings | None = None,
        runner: CommandRunner | None = None,
        *args,
        **kwargs,
    ):
        """Initialize the app with the OpenAFS service.
        """
        super().__init__(*args, **kwargs)
        self._service = OpenAFSService(
            settings=settings,
            runner=runner,
            notifier=self.show_notification,
        )

    @property
    def service(self) -> OpenAFSService:
        return self._service

    def on_mount(self) -> None:
        """Mount the status screen.
        """
        self.push_screen(StatusPanelScreen(self._service))

    def on_unmount(self) -> None:
        """Drop late command completions once the app is gone.
        """
        self._service.close()

    def show_notification(self, notification: Notification) -> None:
        self.notify(
            notification.message,
            title=notification.title,
            severity='error' if notification.is_error else 'information',
        )
