"""Console entrypoint for running the archive sweep from cron."""

import argparse
from collections.abc import Sequence

from meal_counter.app_logging import configure_logging
from meal_counter.containers import build_container
from meal_counter.domain.archive import ArchiveResult


def main(argv: Sequence[str] | None = None) -> int:
    """Run one archive sweep and print the outcome."""
    parser = argparse.ArgumentParser(
        prog="meal-counter-archive",
        description="Move earlier days' meal records into the archive.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="run even if today's sweep already completed",
    )
    args = parser.parse_args(argv)

    configure_logging()
    container = build_container()
    result = container.archive_service.run_sweep(force=args.force)
    print(format_result(result))
    return 0 if result.success else 1


def format_result(result: ArchiveResult) -> str:
    if not result.success:
        return f"Meal Counter archive failed: {result.error}"
    if result.skipped:
        return "Meal Counter archive up to date"
    return f"Meal Counter archived {result.archived} records"


if __name__ == "__main__":
    raise SystemExit(main())
