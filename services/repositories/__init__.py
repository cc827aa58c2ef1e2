"""Repositories module for data access layer."""

from .base import BaseRepository
from .session_log_repo import SessionLogRepository
from .bonus_targets_repo import BonusTargetsRepository
from .user_repo import UserRepository

__all__ = [
    'BaseRepository',
    'SessionLogRepository',
    'BonusTargetsRepository',
    'UserRepository',
]
