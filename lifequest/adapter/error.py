"""Adapter layer errors."""

from lifequest.domain.error import SyncError


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class RemoteStoreError(ProviderError, SyncError):
    """The remote document store rejected or never received an operation."""

    pass
