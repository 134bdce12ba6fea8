"""Persistence for seeded records."""

from .database import SeedDatabase, SeedRecord

__all__ = ["SeedDatabase", "SeedRecord"]
