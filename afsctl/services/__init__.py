from afsctl.services.openafs_service import OpenAFSService

__all__ = [
    'OpenAFSService',
]
