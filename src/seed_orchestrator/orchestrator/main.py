"""CLI entrypoint for the seed runner."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError
from sqlalchemy.exc import ArgumentError

from seed_orchestrator import __version__
from seed_orchestrator.orchestrator.config import SeederSettings
from seed_orchestrator.orchestrator.logging import configure_logging
from seed_orchestrator.orchestrator.persistence import SeedDatabase
from seed_orchestrator.orchestrator.seeds import SEED_GROUPS, register_all_seeds
from seed_orchestrator.orchestrator.tasks import DependencyResolver, Executor, TaskRegistry
from seed_orchestrator.orchestrator.tasks.errors import STRUCTURAL_ERRORS
from seed_orchestrator.orchestrator.tasks.events import (
    ConsoleReporter,
    FanOutReporter,
    LoggingReporter,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seed-orchestrator",
        description="Seed the platform database, running each seed after its dependencies",
    )
    parser.add_argument("--version", action="version", version=f"seed-orchestrator {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Run seed tasks (every registered task by default)")
    selection = run.add_mutually_exclusive_group()
    selection.add_argument(
        "--task",
        dest="tasks",
        action="append",
        default=None,
        metavar="NAME",
        help="Run only this task and its dependencies (repeatable)",
    )
    selection.add_argument(
        "--group",
        choices=sorted(SEED_GROUPS),
        default=None,
        help="Run only the tasks of this seed group and their dependencies",
    )
    run.add_argument(
        "--continue-on-error",
        action="store_true",
        default=None,
        help=(
            "Keep running unrelated tasks when one fails (full runs only; "
            "defaults to SEED_CONTINUE_ON_ERROR)"
        ),
    )

    plan = subparsers.add_parser(
        "plan", help="Print the execution order for tasks without running them"
    )
    plan.add_argument("tasks", nargs="*", metavar="NAME", help="Tasks to plan (default: all)")

    subparsers.add_parser("list", help="List seed groups, tasks and their dependencies")

    return parser


def _print_catalogue(registry: TaskRegistry) -> None:
    grouped: set[str] = set()
    for group in SEED_GROUPS.values():
        print(f"{group.name}: {group.description}")
        for name in group.tasks:
            grouped.add(name)
            dependencies = registry.get(name).dependencies
            suffix = f" (after {', '.join(dependencies)})" if dependencies else ""
            print(f"  {name}{suffix}")

    ungrouped = [name for name in registry.names() if name not in grouped]
    if ungrouped:
        print("ungrouped:")
        for name in ungrouped:
            print(f"  {name}")


def _run(args: argparse.Namespace, registry: TaskRegistry, settings: SeederSettings) -> int:
    executor = Executor(registry, reporter=FanOutReporter([LoggingReporter(), ConsoleReporter()]))

    targets: list[str] = list(args.tasks or [])
    if args.group:
        targets = list(SEED_GROUPS[args.group].tasks)

    if not targets:
        continue_on_error = (
            settings.continue_on_error if args.continue_on_error is None else args.continue_on_error
        )
        summary = executor.run_all(continue_on_error=continue_on_error)
        for name, error in summary.failures.items():
            print(f"Failed: {name}: {error}", file=sys.stderr)
        return 0 if summary.ok else 1

    # Partial runs are always fail-fast.
    for name in targets:
        executor.run_task(name)
    print(f"Seeded {len(executor.completed)} task(s): {', '.join(executor.completed)}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "run" and args.continue_on_error and (args.tasks or args.group):
        print("--continue-on-error is only available for a full run", file=sys.stderr)
        return 2

    try:
        settings = SeederSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        db = SeedDatabase(settings.database_url)
    except (ArgumentError, ImportError) as e:
        # Unparseable URL, unknown dialect or a database driver that is not installed.
        logger.error("Invalid database URL", extra={"error": str(e)})
        print("Configuration error (check DATABASE_URL):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    try:
        registry = register_all_seeds(TaskRegistry(), db, settings)

        if args.command == "list":
            _print_catalogue(registry)
            return 0

        if args.command == "plan":
            order = DependencyResolver(registry).resolve_all(args.tasks or list(registry.names()))
            for position, name in enumerate(order, start=1):
                print(f"{position:>3}. {name}")
            return 0

        if args.command == "run":
            db.create_schema()
            return _run(args, registry, settings)

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except STRUCTURAL_ERRORS as e:
        logger.error("Invalid seed graph", extra={"error": str(e)})
        print(str(e), file=sys.stderr)
        return 3

    except Exception as e:
        # Task failures were already logged with their traceback by the executor.
        logger.error("Seed run aborted", extra={"error": str(e), "error_type": type(e).__name__})
        print(f"Seed run aborted: {e}", file=sys.stderr)
        return 1

    finally:
        db.close()


if __name__ == "__main__":
    raise SystemExit(main())
