import logging
from collections.abc import Callable

from afsctl.openafs.models import (
    ActionResult,
    ControlState,
    Notification,
    SystemStatus,
)
from afsctl.openafs.poller import StatusPoller
from afsctl.openafs.types import (
    ActionOutcome,
    ActionPhase,
    ActionRequest,
    AutostartState,
    ClientState,
)
from afsctl.process.commands import OpenAFSCommands
from afsctl.process.errors import CommandError, SpawnError
from afsctl.process.interfaces import CommandRunner

StatusListener = Callable[[SystemStatus, ControlState], None]
Notifier = Callable[[Notification], None]

STARTABLE_STATES = frozenset({
    ClientState.NOT_RUNNING,
    ClientState.FAILED,
    ClientState.UNKNOWN,
})

# request -> (state while running, state after success, verb, past tense)
_CLIENT_ACTIONS = {
    ActionRequest.START_CLIENT: (
        ClientState.STARTING,
        ClientState.RUNNING,
        'start',
        'started',
    ),
    ActionRequest.STOP_CLIENT: (
        ClientState.STOPPING,
        ClientState.NOT_RUNNING,
        'stop',
        'stopped',
    ),
}


class ActionDispatcher:
    """Runs user actions against the client with optimistic feedback.

    Owns the current `SystemStatus` and the in-flight phase of the two
    action pairs. A second action of a pair is rejected while the first
    one is still running.
    """

    def __init__(
        self,
        runner: CommandRunner,
        poller: StatusPoller,
        commands: OpenAFSCommands | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            runner: Runner used for the control commands
            poller: Poller used for re-checks and reconciliation
            commands: Command line builder
            notifier: Receives one-shot user notifications
        """
        self._logger = logging.getLogger(__name__)

        self._runner = runner
        self._poller = poller
        self._commands = commands or OpenAFSCommands()
        self._notifier = notifier

        self._status = SystemStatus()
        self._client_phase = ActionPhase.IDLE
        self._autostart_phase = ActionPhase.IDLE
        self._pending_autostart: ActionRequest | None = None
        self._listeners: list[StatusListener] = []
        self._active = True

    @property
    def status(self) -> SystemStatus:
        return self._status

    @property
    def active(self) -> bool:
        return self._active

    @property
    def controls(self) -> ControlState:
        """Triggers a presentation adapter should currently offer.
        """
        client_idle = self._client_phase is ActionPhase.IDLE
        client = self._status.client
        return ControlState(
            can_start=client_idle and client in STARTABLE_STATES,
            can_stop=client_idle and client is ClientState.RUNNING,
            can_toggle_autostart=self._autostart_phase is ActionPhase.IDLE,
            client_phase=self._client_phase,
            autostart_phase=self._autostart_phase,
            pending_autostart=self._pending_autostart,
        )

    def subscribe(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: StatusListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def shutdown(self) -> None:
        """Stop applying updates; late completions become no-ops.
        """
        self._active = False
        self._listeners.clear()

    def apply_status(self, status: SystemStatus) -> None:
        """Apply a polled snapshot.

        Fields owned by an in-flight action keep their optimistic value
        until that action resolves.
        """
        if self._client_phase is ActionPhase.IN_FLIGHT:
            status = status.with_client(self._status.client, self._status.cell)
        if self._autostart_phase is ActionPhase.IN_FLIGHT:
            status = status.with_autostart(self._status.autostart)
        self._set_status(status)

    async def dispatch(self, request: ActionRequest) -> ActionResult:
        """Run the action for a request.
        """
        if request in _CLIENT_ACTIONS:
            return await self._run_client_action(request)
        return await self._run_autostart_action(request)

    async def start_client(self) -> ActionResult:
        return await self.dispatch(ActionRequest.START_CLIENT)

    async def stop_client(self) -> ActionResult:
        return await self.dispatch(ActionRequest.STOP_CLIENT)

    async def enable_autostart(self) -> ActionResult:
        return await self.dispatch(ActionRequest.ENABLE_AUTOSTART)

    async def disable_autostart(self) -> ActionResult:
        return await self.dispatch(ActionRequest.DISABLE_AUTOSTART)

    async def toggle_autostart(self) -> ActionResult:
        """Flip autostart based on a fresh read of its current state.
        """
        return await self._run_autostart_action(None)

    async def _run_client_action(self, request: ActionRequest) -> ActionResult:
        if self._client_phase is ActionPhase.IN_FLIGHT:
            self._logger.warning(
                'Ignoring %s, a start or stop is already running',
                request.value,
            )
            return ActionResult(
                request=request,
                outcome=ActionOutcome.REJECTED,
                message='A start or stop is already in progress',
            )

        previous = self._status
        self._client_phase = ActionPhase.IN_FLIGHT
        try:
            return await self._change_client(request)
        except BaseException:
            # Interrupted before an outcome, drop the optimistic state
            self._set_status(
                self._status.with_client(previous.client, previous.cell)
            )
            raise
        finally:
            self._client_phase = ActionPhase.IDLE
            self._publish()

    async def _change_client(self, request: ActionRequest) -> ActionResult:
        transitional, settled, verb, done = _CLIENT_ACTIONS[request]
        argv = (
            self._commands.start()
            if request is ActionRequest.START_CLIENT
            else self._commands.stop()
        )

        self._set_status(self._status.with_client(transitional))

        result = await self._runner.run(argv)

        try:
            result.check()
        except CommandError as e:
            self._logger.error('Failed to %s OpenAFS client: %s', verb, e)
            await self._reconcile()
            self._notify(f'Failed to {verb} OpenAFS client', is_error=True)
            return ActionResult(
                request=request,
                outcome=ActionOutcome.FAILED,
                message=str(e),
            )

        self._set_status(self._status.with_client(settled))
        message = f'OpenAFS client {done}'
        self._notify(message)
        return ActionResult(
            request=request,
            outcome=ActionOutcome.SUCCEEDED,
            message=message,
        )

    async def _run_autostart_action(
        self,
        request: ActionRequest | None,
    ) -> ActionResult:
        """Enable or disable autostart, or toggle it when request is None.
        """
        if self._autostart_phase is ActionPhase.IN_FLIGHT:
            self._logger.warning('Ignoring autostart change, one is running')
            return ActionResult(
                request=request,
                outcome=ActionOutcome.REJECTED,
                message='An autostart change is already in progress',
            )

        self._autostart_phase = ActionPhase.IN_FLIGHT
        try:
            return await self._change_autostart(request)
        finally:
            self._autostart_phase = ActionPhase.IDLE
            self._pending_autostart = None
            self._publish()

    async def _change_autostart(
        self,
        request: ActionRequest | None,
    ) -> ActionResult:
        # The displayed state may be stale, decide from a fresh read
        current = await self._poller.query_autostart()
        self._set_status(self._status.with_autostart(current))

        if current is AutostartState.UNKNOWN:
            self._notify('Failed to check autostart status', is_error=True)
            return ActionResult(
                request=request,
                outcome=ActionOutcome.FAILED,
                message='Failed to check autostart status',
            )

        target = (
            ActionRequest.DISABLE_AUTOSTART
            if current is AutostartState.ENABLED
            else ActionRequest.ENABLE_AUTOSTART
        )
        if request is not None and request is not target:
            return ActionResult(
                request=request,
                outcome=ActionOutcome.UNCHANGED,
                message=f'Autostart is already {current.value}',
            )

        enable = target is ActionRequest.ENABLE_AUTOSTART
        action = 'enable' if enable else 'disable'
        self._pending_autostart = target
        self._publish()

        result = await self._runner.run(self._commands.set_autostart(enable))

        try:
            result.check()
        except CommandError as e:
            self._logger.error('Failed to %s autostart: %s', action, e)
            # The outcome is not known, show an error rather than a guess
            self._set_status(
                self._status.with_autostart(AutostartState.UNKNOWN)
            )
            message = 'Error toggling autostart' \
                if isinstance(e, SpawnError) else 'Failed to toggle autostart'
            self._notify(message, is_error=True)
            return ActionResult(
                request=target,
                outcome=ActionOutcome.FAILED,
                message=str(e),
            )

        refreshed = await self._poller.query_autostart()
        self._set_status(self._status.with_autostart(refreshed))
        message = f'Autostart {action}d successfully'
        self._notify(message)
        return ActionResult(
            request=target,
            outcome=ActionOutcome.SUCCEEDED,
            message=message,
        )

    async def _reconcile(self) -> None:
        """Replace the guessed client state with a fresh poll.

        Runs while the start/stop pair is still in flight, so the client
        field is taken from the poll directly.
        """
        status = await self._poller.poll_once()
        if self._autostart_phase is ActionPhase.IN_FLIGHT:
            status = status.with_autostart(self._status.autostart)
        self._set_status(status)

    def _set_status(self, status: SystemStatus) -> None:
        if not self._active:
            return
        self._status = status
        self._publish()

    def _publish(self) -> None:
        if not self._active:
            return
        controls = self.controls
        for listener in list(self._listeners):
            try:
                listener(self._status, controls)
            except Exception as e:
                self._logger.error(
                    'Status listener failed: %s',
                    e,
                    exc_info=True,
                )

    def _notify(self, message: str, is_error: bool = False) -> None:
        if not self._active or self._notifier is None:
            return
        self._notifier(Notification(message=message, is_error=is_error))
