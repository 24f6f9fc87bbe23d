from enum import StrEnum


class ClientState(StrEnum):
    """Lifecycle state of the OpenAFS client service.
    """

    RUNNING = 'running'
    STARTING = 'starting'
    STOPPING = 'stopping'
    FAILED = 'failed'
    NOT_RUNNING = 'not-running'
    UNKNOWN = 'unknown'


class ActivationState(StrEnum):
    """Raw activation states reported by `systemctl is-active`.
    """

    ACTIVE = 'active'
    ACTIVATING = 'activating'
    DEACTIVATING = 'deactivating'
    FAILED = 'failed'
    INACTIVE = 'inactive'


class CellStatus(StrEnum):
    """Availability of the workstation cell name.
    """

    AVAILABLE = 'available'
    NOT_AVAILABLE = 'not-available'
    ERROR = 'error'


class AutostartState(StrEnum):
    """Whether the client service starts at boot.
    """

    ENABLED = 'enabled'
    DISABLED = 'disabled'
    UNKNOWN = 'unknown'


class ActionRequest(StrEnum):
    """User-requested actions.
    """

    START_CLIENT = 'start-client'
    STOP_CLIENT = 'stop-client'
    ENABLE_AUTOSTART = 'enable-autostart'
    DISABLE_AUTOSTART = 'disable-autostart'


class ActionPhase(StrEnum):
    """Progress of an action pair (start/stop or enable/disable).
    """

    IDLE = 'idle'
    IN_FLIGHT = 'in-flight'


class ActionOutcome(StrEnum):
    """How a dispatched action resolved.
    """

    SUCCEEDED = 'succeeded'
    FAILED = 'failed'
    REJECTED = 'rejected'
    UNCHANGED = 'unchanged'


class PollingState(StrEnum):
    """State of the periodic status poller.
    """

    IDLE = 'idle'
    POLLING = 'polling'
