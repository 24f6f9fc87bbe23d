from afsctl.models.settings import OpenAFSSettings

__all__ = [
    'OpenAFSSettings',
]
