from afsctl.openafs.models import ControlState, SystemStatus, TokenEntry
from afsctl.openafs.types import (
    ActionRequest,
    AutostartState,
    CellStatus,
    ClientState,
)

_CLIENT_LABELS = {
    ClientState.STARTING: 'Client: Starting...',
    ClientState.STOPPING: 'Client: Stopping...',
    ClientState.FAILED: 'Client: Error',
    ClientState.NOT_RUNNING: 'Client: Not Running',
    ClientState.UNKNOWN: 'Client: Unknown',
}


def format_client_status(status: SystemStatus) -> str:
    """Format the client line, naming the cell while running.
    """
    if status.client is not ClientState.RUNNING:
        return _CLIENT_LABELS[status.client]

    cell = status.cell
    if cell is None:
        return 'Client: Running'
    if cell.status is CellStatus.AVAILABLE:
        return f'Client: {cell.name}'
    if cell.status is CellStatus.ERROR:
        return 'Client: Running (cell: error)'
    return 'Client: Running (cell: not available)'


def format_token(token: TokenEntry) -> str:
    return f'ID {token.afs_id}, {token.cell}, Expires: {token.expires_at}'


def format_token_status(status: SystemStatus) -> str:
    """Format the token block.
    """
    if status.tokens_error:
        return 'Token: Error'
    if not status.tokens:
        return 'Token: Not Available'
    return 'Token(s):\n' + '\n'.join(format_token(t) for t in status.tokens)


def format_autostart_status(
    status: SystemStatus,
    controls: ControlState | None = None,
) -> str:
    """Format the autostart toggle label.
    """
    if controls is not None and controls.pending_autostart is not None:
        if controls.pending_autostart is ActionRequest.ENABLE_AUTOSTART:
            return 'Enabling Autostart...'
        return 'Disabling Autostart...'

    if status.autostart is AutostartState.UNKNOWN:
        return 'Autostart: Error'
    if status.autostart is AutostartState.ENABLED:
        return 'Autostart on Boot: On'
    return 'Autostart on Boot: Off'


def format_status(
    status: SystemStatus,
    controls: ControlState | None = None,
) -> str:
    """Format the full status report.
    """
    return '\n'.join([
        format_client_status(status),
        format_token_status(status),
        format_autostart_status(status, controls),
    ])
