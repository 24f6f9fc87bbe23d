from typing import Self

from pydantic import BaseModel, Field, model_validator

from afsctl.openafs.types import (
    ActionOutcome,
    ActionPhase,
    ActionRequest,
    AutostartState,
    CellStatus,
    ClientState,
)


class CellInfo(BaseModel):
    """Cell the workstation belongs to.

    Args:
        status: Whether the cell name could be determined
        name: Cell name, only set when available
    """
    model_config = {'frozen': True}

    status: CellStatus = Field(...)
    name: str | None = Field(None)

    @model_validator(mode='after')
    def validate_name_matches_status(self) -> 'CellInfo':
        if self.status is CellStatus.AVAILABLE and not self.name:
            raise ValueError('An available cell needs a name')
        if self.status is not CellStatus.AVAILABLE and self.name is not None:
            raise ValueError('Only an available cell carries a name')
        return self

    @classmethod
    def available(cls, name: str) -> Self:
        return cls(status=CellStatus.AVAILABLE, name=name)

    @classmethod
    def not_available(cls) -> Self:
        return cls(status=CellStatus.NOT_AVAILABLE)

    @classmethod
    def error(cls) -> Self:
        return cls(status=CellStatus.ERROR)


class TokenEntry(BaseModel):
    """A single AFS token held by the cache manager.

    Args:
        afs_id: Numeric AFS user id
        cell: Cell the token grants access to
        expires_at: Expiry timestamp exactly as printed by `tokens`
    """
    model_config = {'frozen': True}

    afs_id: int = Field(..., ge=0)
    cell: str = Field(..., min_length=1)
    expires_at: str = Field(...)


class SystemStatus(BaseModel):
    """Snapshot of the client, token and autostart status.

    Args:
        client: Client service state
        cell: Workstation cell, only looked up while the client runs
        tokens: Tokens in the order `tokens` printed them
        tokens_error: The token listing command could not be run
        autostart: Whether the client starts at boot
    """
    model_config = {'frozen': True}

    client: ClientState = Field(ClientState.UNKNOWN)
    cell: CellInfo | None = Field(None)
    tokens: tuple[TokenEntry, ...] = Field(())
    tokens_error: bool = Field(False)
    autostart: AutostartState = Field(AutostartState.UNKNOWN)

    @model_validator(mode='after')
    def validate_cell_requires_running(self) -> 'SystemStatus':
        if self.cell is not None and self.client is not ClientState.RUNNING:
            raise ValueError('Cell information requires a running client')
        return self

    def with_client(
        self,
        client: ClientState,
        cell: CellInfo | None = None,
    ) -> Self:
        """Return a copy with a new client state.

        Cell information is dropped unless the client is running.
        """
        if client is not ClientState.RUNNING:
            cell = None
        return self.model_copy(update={'client': client, 'cell': cell})

    def with_autostart(self, autostart: AutostartState) -> Self:
        return self.model_copy(update={'autostart': autostart})


class ActionResult(BaseModel):
    """Result of a dispatched action.

    Args:
        request: The action that was requested, None for an undecided toggle
        outcome: How the action resolved
        message: Human readable summary
    """
    model_config = {'frozen': True}

    request: ActionRequest | None = Field(None)
    outcome: ActionOutcome = Field(...)
    message: str = Field('', max_length=1000)

    @property
    def success(self) -> bool:
        return self.outcome in (
            ActionOutcome.SUCCEEDED,
            ActionOutcome.UNCHANGED,
        )


class ControlState(BaseModel):
    """Which action triggers a presentation adapter should offer.

    Args:
        can_start: Start trigger is enabled
        can_stop: Stop trigger is enabled
        can_toggle_autostart: Autostart toggle is enabled
        client_phase: Progress of the start/stop pair
        autostart_phase: Progress of the enable/disable pair
        pending_autostart: Autostart action currently being applied
    """
    model_config = {'frozen': True}

    can_start: bool = Field(...)
    can_stop: bool = Field(...)
    can_toggle_autostart: bool = Field(...)
    client_phase: ActionPhase = Field(ActionPhase.IDLE)
    autostart_phase: ActionPhase = Field(ActionPhase.IDLE)
    pending_autostart: ActionRequest | None = Field(None)


class Notification(BaseModel):
    """One-shot message for the user.

    Args:
        title: Notification title
        message: Notification body
        is_error: Whether the notification reports a failure
    """
    model_config = {'frozen': True}

    title: str = Field('OpenAFS Client')
    message: str = Field(..., min_length=1)
    is_error: bool = Field(False)
