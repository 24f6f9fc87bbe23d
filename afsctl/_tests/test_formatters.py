import pytest

from afsctl.openafs.formatters import (
    format_autostart_status,
    format_client_status,
    format_status,
    format_token_status,
)
from afsctl.openafs.models import (
    CellInfo,
    ControlState,
    SystemStatus,
    TokenEntry,
)
from afsctl.openafs.types import (
    ActionPhase,
    ActionRequest,
    AutostartState,
    ClientState,
)


@pytest.mark.parametrize(
    ('status', 'expected'),
    [
        (
            SystemStatus(
                client=ClientState.RUNNING,
                cell=CellInfo.available('example.com'),
            ),
            'Client: example.com',
        ),
        (
            SystemStatus(
                client=ClientState.RUNNING,
                cell=CellInfo.not_available(),
            ),
            'Client: Running (cell: not available)',
        ),
        (
            SystemStatus(client=ClientState.RUNNING, cell=CellInfo.error()),
            'Client: Running (cell: error)',
        ),
        (SystemStatus(client=ClientState.RUNNING), 'Client: Running'),
        (SystemStatus(client=ClientState.STARTING), 'Client: Starting...'),
        (SystemStatus(client=ClientState.STOPPING), 'Client: Stopping...'),
        (SystemStatus(client=ClientState.FAILED), 'Client: Error'),
        (SystemStatus(client=ClientState.NOT_RUNNING), 'Client: Not Running'),
        (SystemStatus(), 'Client: Unknown'),
    ],
)
def test_format_client_status(status, expected):
    assert format_client_status(status) == expected


def test_format_token_status():
    status = SystemStatus(
        tokens=(
            TokenEntry(afs_id=1234, cell='example.com', expires_at='Jan  1 12:00'),
            TokenEntry(afs_id=5, cell='other.org', expires_at='Feb 2 01:00'),
        )
    )
    assert format_token_status(status) == (
        'Token(s):\n'
        'ID 1234, example.com, Expires: Jan  1 12:00\n'
        'ID 5, other.org, Expires: Feb 2 01:00'
    )


def test_format_token_status_absent_and_error():
    assert format_token_status(SystemStatus()) == 'Token: Not Available'
    assert format_token_status(SystemStatus(tokens_error=True)) == 'Token: Error'


def test_format_autostart_status():
    enabled = SystemStatus(autostart=AutostartState.ENABLED)
    disabled = SystemStatus(autostart=AutostartState.DISABLED)

    assert format_autostart_status(enabled) == 'Autostart on Boot: On'
    assert format_autostart_status(disabled) == 'Autostart on Boot: Off'
    assert format_autostart_status(SystemStatus()) == 'Autostart: Error'


def test_format_autostart_status_pending():
    controls = ControlState(
        can_start=False,
        can_stop=False,
        can_toggle_autostart=False,
        autostart_phase=ActionPhase.IN_FLIGHT,
        pending_autostart=ActionRequest.DISABLE_AUTOSTART,
    )
    status = SystemStatus(autostart=AutostartState.ENABLED)

    assert format_autostart_status(status, controls) == 'Disabling Autostart...'


def test_format_status_joins_sections():
    text = format_status(SystemStatus(client=ClientState.NOT_RUNNING))
    assert text.splitlines() == [
        'Client: Not Running',
        'Token: Not Available',
        'Autostart: Error',
    ]
