"""Persistence services for examples and guides."""

from .storage import DatabaseStorage
from .seed import seed_database

__all__ = ['DatabaseStorage', 'seed_database']
