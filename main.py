"""ModelRadar - command line access to the aggregated AI model listings."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from modelradar import ModelAggregator, load_settings
from modelradar.core import today
from modelradar.models import APIResponse


# ─────────────────────────────────────────────────────────────
# Logging setup
# ─────────────────────────────────────────────────────────────

def setup_logging(log_dir: Path = Path("logs")) -> Path:
    """Configure logging to a daily file."""
    log_dir.mkdir(exist_ok=True)

    log_file = log_dir / f"{today()}.log"

    # File handler (detailed)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S"
    ))

    # Configure root logger
    logging.basicConfig(
        level=logging.INFO,
        handlers=[file_handler]
    )

    return log_file


# ─────────────────────────────────────────────────────────────
# Commands
# ─────────────────────────────────────────────────────────────

COMMANDS = {
    "all": lambda radar, args: radar.get_all_models(),
    "trend": lambda radar, args: radar.get_trend_data(),
    "category": lambda radar, args: radar.get_models_by_category(args.value),
    "source": lambda radar, args: radar.get_models_by_source(args.value),
    "search": lambda radar, args: radar.search_models(args.value),
    "latest": lambda radar, args: radar.get_latest_models(),
    "categories": lambda radar, args: radar.get_categories(),
    "category-list": lambda radar, args: radar.get_all_categories(),
}

NEEDS_VALUE = {"category", "source", "search"}


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="ModelRadar - AI models from Hugging Face, GitHub and arXiv",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py all                       # Every model from all sources
  python main.py category Research         # Only arXiv papers
  python main.py source GitHub             # Only GitHub repositories
  python main.py search llama              # Name/description substring
  python main.py trend                     # Synthetic 31-day series
        """
    )

    parser.add_argument(
        "command",
        choices=sorted(COMMANDS),
        help="Operation to run"
    )

    parser.add_argument(
        "value",
        nargs="?",
        default=None,
        help="Category, source name or search query (for category/source/search)"
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Sources YAML (default: $MODELRADAR_CONFIG or config/sources.yaml)"
    )

    parser.add_argument(
        "--subscribe",
        action="append",
        default=[],
        metavar="MODEL_ID",
        help="Mark a model id as subscribed for this run (repeatable)"
    )

    args = parser.parse_args(argv)
    if args.command in NEEDS_VALUE and args.value is None:
        parser.error(f"'{args.command}' requires a value")
    return args


async def execute(args, radar: ModelAggregator) -> APIResponse:
    """Run the selected operation on ``radar``."""
    for model_id in args.subscribe:
        radar.subscribe(model_id)
    return await COMMANDS[args.command](radar, args)


async def _run_async(args) -> APIResponse:
    settings = load_settings(args.config)
    async with ModelAggregator(settings) as radar:
        return await execute(args, radar)


def run(argv=None) -> int:
    """Run one command, print the {data, error} envelope as JSON."""
    args = parse_args(argv)

    log_file = setup_logging()
    logger = logging.getLogger(__name__)
    logger.info(f"ModelRadar: {args.command} {args.value or ''}".rstrip())

    response = asyncio.run(_run_async(args))
    print(response.model_dump_json(indent=2))

    if response.error:
        logger.warning(f"Completed with error: {response.error} (log: {log_file})")
        return 1
    logger.info(f"Completed: {len(response.data)} records")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(1)
