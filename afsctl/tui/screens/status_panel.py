from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static

from afsctl.openafs.formatters import (
    format_autostart_status,
    format_client_status,
    format_token_status,
)
from afsctl.openafs.models import ControlState, SystemStatus
from afsctl.services.openafs_service import OpenAFSService


class StatusPanelScreen(Screen):
    """A screen with the client status and its action buttons.

    Status is only polled while the screen is shown.
    """

    DEFAULT_CSS = """
    #status, #actions {
        height: auto;
    }

    #status Static {
        padding: 1 2;
    }

    #actions Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        ('r', 'refresh', 'Refresh'),
        ('q', 'app.quit', 'Quit'),
    ]

    def __init__(self, service: OpenAFSService) -> None:
        """Initialise the screen.
        """
        super().__init__()
        self._service = service

    def compose(self) -> ComposeResult:
        """Compose the screen.
        """
        yield Header()
        with Vertical(id='status'):
            yield Static('Client: Checking...', id='client-status')
            yield Static('Token: Checking...', id='token-status')
        with Horizontal(id='actions'):
            yield Button(
                'Start OpenAFS Client',
                id='start',
                variant='success',
            )
            yield Button('Stop OpenAFS Client', id='stop', variant='error')
            yield Button('Autostart on Boot', id='autostart')
        yield Footer()

    def on_mount(self) -> None:
        """Render the last known status and start polling.
        """
        self.render_status(self._service.status, self._service.controls)
        self._service.start_monitoring(self.render_status)

    def on_screen_resume(self) -> None:
        self._service.start_monitoring(self.render_status)

    def on_screen_suspend(self) -> None:
        self._service.stop_monitoring(self.render_status)

    def on_unmount(self) -> None:
        self._service.stop_monitoring(self.render_status)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Dispatch the action behind a button without blocking the UI.
        """
        button_id = event.button.id
        if button_id == 'start':
            self.run_worker(self._service.start_client())
        elif button_id == 'stop':
            self.run_worker(self._service.stop_client())
        elif button_id == 'autostart':
            self.run_worker(self._service.toggle_autostart())

    def action_refresh(self) -> None:
        self.run_worker(self._service.refresh())

    def render_status(
        self,
        status: SystemStatus,
        controls: ControlState,
    ) -> None:
        """Show a status snapshot and enable the allowed actions.
        """
        self.query_one('#client-status', Static).update(
            format_client_status(status)
        )
        self.query_one('#token-status', Static).update(
            format_token_status(status)
        )

        autostart_button = self.query_one('#autostart', Button)
        autostart_button.label = format_autostart_status(status, controls)
        autostart_button.disabled = not controls.can_toggle_autostart

        self.query_one('#start', Button).disabled = not controls.can_start
        self.query_one('#stop', Button).disabled = not controls.can_stop
