import asyncio
import logging
from collections.abc import Callable

from afsctl.openafs.models import CellInfo, SystemStatus, TokenEntry
from afsctl.openafs.parsers import (
    autostart_state_from_result,
    client_state_from_result,
    parse_cell_name,
    parse_tokens,
)
from afsctl.openafs.types import AutostartState, ClientState, PollingState
from afsctl.process.commands import OpenAFSCommands
from afsctl.process.interfaces import CommandRunner

StatusCallback = Callable[[SystemStatus], None]


class StatusPoller:
    """Queries the client, token and autostart status.

    Produces `SystemStatus` snapshots on demand with `poll_once` and on a
    fixed cadence between `start_polling` and `stop_polling`.
    """

    def __init__(
        self,
        runner: CommandRunner,
        commands: OpenAFSCommands | None = None,
    ) -> None:
        """Initialize the poller.

        Args:
            runner: Runner used for every status query
            commands: Command line builder, defaults to the standard unit
        """
        self._logger = logging.getLogger(__name__)

        self._runner = runner
        self._commands = commands or OpenAFSCommands()

        self._state = PollingState.IDLE
        self._interval = 0.0
        self._on_update: StatusCallback | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._cycle: asyncio.Task[None] | None = None
        # Strong references to cycles until they finish, stopped ones included
        self._cycles: set[asyncio.Task[None]] = set()
        # Bumped on every start/stop so late cycles can tell they are stale
        self._generation = 0

    @property
    def state(self) -> PollingState:
        return self._state

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def pending_cycles(self) -> int:
        """Number of poll cycles that have not finished yet.
        """
        return len(self._cycles)

    async def query_client(self) -> tuple[ClientState, CellInfo | None]:
        """Query the client activation state, plus the cell when running.
        """
        result = await self._runner.run(self._commands.is_active())
        client = client_state_from_result(result)
        if client is ClientState.UNKNOWN:
            self._logger.warning(
                'Could not query client state: %s',
                result.spawn_error,
            )
            return client, None

        if client is not ClientState.RUNNING:
            return client, None

        return client, await self.query_cell()

    async def query_cell(self) -> CellInfo:
        """Query the cell this workstation belongs to.
        """
        result = await self._runner.run(self._commands.wscell())
        if not result.spawned:
            self._logger.error('Failed to get cell: %s', result.spawn_error)
            return CellInfo.error()
        return parse_cell_name(result.stdout)

    async def query_tokens(self) -> list[TokenEntry] | None:
        """Query the tokens held by the cache manager.

        Returns:
            Token entries, or None if the listing could not be run
        """
        result = await self._runner.run(self._commands.tokens())
        if not result.spawned:
            self._logger.error('Failed to list tokens: %s', result.spawn_error)
            return None
        return parse_tokens(result.stdout)

    async def query_autostart(self) -> AutostartState:
        """Query whether the client unit is enabled at boot.
        """
        result = await self._runner.run(self._commands.is_enabled())
        state = autostart_state_from_result(result)
        if state is AutostartState.UNKNOWN:
            self._logger.error(
                'Failed to check autostart: %s',
                result.spawn_error,
            )
        return state

    async def poll_once(self) -> SystemStatus:
        """Run all status queries and assemble a snapshot.

        The three top-level queries are independent and run concurrently;
        a failure in one never affects the others.
        """
        (client, cell), tokens, autostart = await asyncio.gather(
            self.query_client(),
            self.query_tokens(),
            self.query_autostart(),
        )

        return SystemStatus(
            client=client,
            cell=cell,
            tokens=tuple(tokens or ()),
            tokens_error=tokens is None,
            autostart=autostart,
        )

    def start_polling(
        self,
        interval: float,
        on_update: StatusCallback,
    ) -> None:
        """Poll immediately and then every `interval` seconds.

        Calling this while already polling replaces the running cadence.

        Args:
            interval: Seconds between two polls
            on_update: Receives every snapshot

        Raises:
            ValueError: If the interval is not positive
        """
        if interval <= 0:
            raise ValueError(f'Polling interval must be positive: {interval}')

        self.stop_polling()

        self._interval = interval
        self._on_update = on_update
        self._state = PollingState.POLLING
        self._logger.debug('Polling status every %.2f seconds', interval)
        self._schedule_tick(0, asyncio.get_running_loop())

    def stop_polling(self) -> None:
        """Stop scheduling polls.

        A poll that is already running completes, but its snapshot is
        dropped instead of delivered.
        """
        if self._state is PollingState.IDLE:
            return

        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        self._state = PollingState.IDLE
        self._on_update = None
        self._cycle = None
        self._generation += 1
        self._logger.debug('Stopped polling status')

    def _schedule_tick(
        self,
        delay: float,
        loop: asyncio.AbstractEventLoop,
    ) -> None:
        self._timer = loop.call_later(
            delay,
            self._on_tick,
            self._generation,
            loop,
        )

    def _on_tick(
        self,
        generation: int,
        loop: asyncio.AbstractEventLoop,
    ) -> None:
        if generation != self._generation:
            return

        if self._cycle is not None and not self._cycle.done():
            self._logger.debug('Previous poll still running, skipping tick')
        else:
            self._cycle = loop.create_task(self._run_cycle(generation))
            self._cycles.add(self._cycle)
            self._cycle.add_done_callback(self._cycles.discard)

        self._schedule_tick(self._interval, loop)

    async def _run_cycle(self, generation: int) -> None:
        status = await self.poll_once()

        if generation != self._generation or self._on_update is None:
            self._logger.debug('Dropping status from a stopped poller')
            return

        try:
            self._on_update(status)
        except Exception as e:
            self._logger.error(
                'Status update callback failed: %s',
                e,
                exc_info=True,
            )
