"""Parsers turning raw command output into typed status values.

None of these functions raise: unexpected output degrades to the
not-running, not-available or unknown branch of the respective type.
"""
import re
from collections.abc import Iterator

from pydantic import ValidationError

from afsctl.openafs.models import CellInfo, TokenEntry
from afsctl.openafs.types import ActivationState, AutostartState, ClientState
from afsctl.process.models import CommandResult

CELL_NOT_RECOGNIZED = 'not recognized'

TOKEN_PATTERN = re.compile(
    r'AFS ID (\d+).*?for (\S+).*?\[Expires ([^\]]*)\]'
)

_ACTIVATION_TO_CLIENT = {
    ActivationState.ACTIVE: ClientState.RUNNING,
    ActivationState.ACTIVATING: ClientState.STARTING,
    ActivationState.DEACTIVATING: ClientState.STOPPING,
    ActivationState.FAILED: ClientState.FAILED,
}


def parse_client_state(raw: str) -> ClientState:
    """Map `systemctl is-active` output to a client state.

    Anything that is not a known transitional, running or failed state,
    `inactive` included, means the client is not running.
    """
    state = raw.strip()
    for activation, client in _ACTIVATION_TO_CLIENT.items():
        if state == activation:
            return client
    return ClientState.NOT_RUNNING


def client_state_from_result(result: CommandResult) -> ClientState:
    """Client state for a finished `systemctl is-active` call.

    The exit status is ignored: systemctl reports inactive units with a
    non-zero status but still prints the state.
    """
    if not result.spawned:
        return ClientState.UNKNOWN
    return parse_client_state(result.stdout)


def parse_cell_name(raw: str) -> CellInfo:
    """Map `fs wscell` output to cell information.
    """
    cell = raw.strip()
    if not cell or CELL_NOT_RECOGNIZED in cell:
        return CellInfo.not_available()
    return CellInfo.available(cell)


def iter_tokens(raw: str) -> Iterator[TokenEntry]:
    """Lazily yield the tokens found in `tokens` output, in order.
    """
    for match in TOKEN_PATTERN.finditer(raw):
        afs_id, cell, expires_at = match.groups()
        try:
            yield TokenEntry(
                afs_id=int(afs_id),
                cell=cell,
                expires_at=expires_at,
            )
        except ValidationError:
            continue


def parse_tokens(raw: str) -> list[TokenEntry]:
    """Parse every token entry in `tokens` output.

    Returns:
        Token entries in order of appearance, empty if none matched
    """
    return list(iter_tokens(raw))


def parse_autostart_state(raw: str) -> AutostartState:
    """Map `systemctl is-enabled` output to an autostart state.
    """
    if raw.strip() == AutostartState.ENABLED:
        return AutostartState.ENABLED
    return AutostartState.DISABLED


def autostart_state_from_result(result: CommandResult) -> AutostartState:
    """Autostart state for a finished `systemctl is-enabled` call.
    """
    if not result.spawned:
        return AutostartState.UNKNOWN
    return parse_autostart_state(result.stdout)
