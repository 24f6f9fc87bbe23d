from afsctl.openafs.dispatcher import (
    ActionDispatcher,
    Notifier,
    StatusListener,
)
from afsctl.openafs.models import (
    ActionResult,
    CellInfo,
    ControlState,
    Notification,
    SystemStatus,
    TokenEntry,
)
from afsctl.openafs.poller import StatusPoller
from afsctl.openafs.types import (
    ActionOutcome,
    ActionPhase,
    ActionRequest,
    AutostartState,
    CellStatus,
    ClientState,
    PollingState,
)

__all__ = [
    'ActionDispatcher',
    'ActionOutcome',
    'ActionPhase',
    'ActionRequest',
    'ActionResult',
    'AutostartState',
    'CellInfo',
    'CellStatus',
    'ClientState',
    'ControlState',
    'Notification',
    'Notifier',
    'PollingState',
    'StatusListener',
    'StatusPoller',
    'SystemStatus',
    'TokenEntry',
]
