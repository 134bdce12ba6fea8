"""Seed Orchestrator.

Populates the platform database by running seed tasks in dependency order:
- configuration loaded from `.env`
- structured logging
- each seed runs once per invocation and shares its results with later seeds
"""

__version__ = "0.1.0"

from seed_orchestrator.orchestrator.config import SeederSettings

__all__ = ["__version__", "SeederSettings"]
