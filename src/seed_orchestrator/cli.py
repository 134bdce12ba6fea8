"""Console script entrypoint.

The CLI itself is implemented in `seed_orchestrator.orchestrator.main`.
"""

from __future__ import annotations

from seed_orchestrator.orchestrator.main import main

__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
