"""
Database repositories for CareerPath data access.

This module provides repository classes for all database collections,
implementing the repository pattern for clean data access.
"""

# Base repository
from .base import BaseRepository

# Entity repositories
from .user_repository import UserRepository
from .job_repository import JobRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "JobRepository",
]
