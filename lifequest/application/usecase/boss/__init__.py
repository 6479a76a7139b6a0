"""Boss use cases."""

from .assign_boss import AssignBossRequest, AssignBossResponse, AssignBossUseCase
from .get_boss import GetBossRequest, GetBossResponse, GetBossUseCase
from .reset_boss import ResetBossRequest, ResetBossUseCase

__all__ = [
    "AssignBossRequest",
    "AssignBossResponse",
    "AssignBossUseCase",
    "GetBossRequest",
    "GetBossResponse",
    "GetBossUseCase",
    "ResetBossRequest",
    "ResetBossUseCase",
]
