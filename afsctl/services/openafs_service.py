import logging

from afsctl.models.settings import OpenAFSSettings
from afsctl.openafs.dispatcher import (
    ActionDispatcher,
    Notifier,
    StatusListener,
)
from afsctl.openafs.models import ActionResult, ControlState, SystemStatus
from afsctl.openafs.poller import StatusPoller
from afsctl.openafs.types import ActionRequest, PollingState
from afsctl.process.commands import OpenAFSCommands
from afsctl.process.interfaces import CommandRunner
from afsctl.process.runner import SubprocessRunner


class OpenAFSService:
    """A service for monitoring and controlling the OpenAFS client.

    Wires the poller and the dispatcher together for presentation
    adapters.
    """

    def __init__(
        self,
        settings: OpenAFSSettings | None = None,
        runner: CommandRunner | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        """Initialise the service.

        Args:
            settings: Unit name, poll interval and tool paths
            runner: Command runner, a subprocess runner by default
            notifier: Receives one-shot user notifications
        """
        self._logger = logging.getLogger(__name__)

        self._settings = settings or OpenAFSSettings()
        self._runner = runner or SubprocessRunner()
        commands = OpenAFSCommands(self._settings)
        self._poller = StatusPoller(self._runner, commands)
        self._dispatcher = ActionDispatcher(
            self._runner,
            self._poller,
            commands,
            notifier,
        )

    @property
    def settings(self) -> OpenAFSSettings:
        return self._settings

    @property
    def status(self) -> SystemStatus:
        return self._dispatcher.status

    @property
    def controls(self) -> ControlState:
        return self._dispatcher.controls

    @property
    def polling_state(self) -> PollingState:
        return self._poller.state

    async def refresh(self) -> SystemStatus:
        """Poll once and apply the snapshot.
        """
        self._dispatcher.apply_status(await self._poller.poll_once())
        return self._dispatcher.status

    def start_monitoring(self, listener: StatusListener | None = None) -> None:
        """Start periodic polling, e.g. when a status view becomes visible.
        """
        if listener is not None:
            self._dispatcher.unsubscribe(listener)
            self._dispatcher.subscribe(listener)
        self._poller.start_polling(
            self._settings.poll_interval,
            self._dispatcher.apply_status,
        )

    def stop_monitoring(self, listener: StatusListener | None = None) -> None:
        """Stop periodic polling, e.g. when a status view is hidden.
        """
        self._poller.stop_polling()
        if listener is not None:
            self._dispatcher.unsubscribe(listener)

    async def dispatch(self, request: ActionRequest) -> ActionResult:
        return await self._dispatcher.dispatch(request)

    async def start_client(self) -> ActionResult:
        return await self._dispatcher.start_client()

    async def stop_client(self) -> ActionResult:
        return await self._dispatcher.stop_client()

    async def toggle_autostart(self) -> ActionResult:
        return await self._dispatcher.toggle_autostart()

    def close(self) -> None:
        """Stop polling and ignore any late command completions.
        """
        self._logger.debug('Closing OpenAFS service')
        self._poller.stop_polling()
        self._dispatcher.shutdown()
