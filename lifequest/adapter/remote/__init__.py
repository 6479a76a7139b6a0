"""Remote document store adapter."""

from .client import HttpRemoteStore, MockRemoteStore

__all__ = ["HttpRemoteStore", "MockRemoteStore"]
