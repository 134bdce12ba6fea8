"""Seed runner: configuration, logging, task orchestration, persistence and seeds."""

__all__: list[str] = []
