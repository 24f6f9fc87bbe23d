from pydantic import BaseModel, Field, field_validator

from afsctl.constants import CommandPaths, PollingConfig


class OpenAFSSettings(BaseModel):
    """Runtime settings for the status poller and action dispatcher.
    """
    model_config = {'frozen': True}

    unit_name: str = Field(
        PollingConfig.DEFAULT_UNIT_NAME,
        min_length=1,
        description='Systemd unit of the OpenAFS client',
    )
    poll_interval: float = Field(
        PollingConfig.DEFAULT_INTERVAL,
        gt=0,
        description='Seconds between two status polls',
    )
    systemctl_path: str = Field(
        CommandPaths.SYSTEMCTL.value,
        description='Path of the systemctl binary',
    )
    fs_path: str = Field(
        CommandPaths.FS.value,
        description='Path of the OpenAFS fs binary',
    )
    tokens_path: str = Field(
        CommandPaths.TOKENS.value,
        description='Path of the OpenAFS tokens binary',
    )
    pkexec_path: str = Field(
        CommandPaths.PKEXEC.value,
        description='Path of the pkexec privilege escalation wrapper',
    )

    @field_validator('unit_name')
    @classmethod
    def validate_unit_name(cls, v: str) -> str:
        if any(ch.isspace() for ch in v):
            raise ValueError('Unit name cannot contain whitespace')
        return v

    @field_validator(
        'systemctl_path',
        'fs_path',
        'tokens_path',
        'pkexec_path',
    )
    @classmethod
    def validate_command_path(cls, v: str) -> str:
        if not v:
            raise ValueError('Command path cannot be empty')
        if '\0' in v:
            raise ValueError('Command path cannot contain NUL bytes')
        return v
