"""
Command-line interface for photo search query suggestion.

Reads prose from files or stdin and prints an illustration plan (title,
keywords, themes, entities, content type and ranked queries) per input.

Usage:
    # Single file
    python -m text_illustrator.cli.suggest article.txt

    # From stdin, reproducible descriptors
    cat article.txt | python -m text_illustrator.cli.suggest - --seed 42

    # Several files with a query config override, saved to file
    python -m text_illustrator.cli.suggest a.txt b.txt --config queries.json --output plans.jsonl
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog

from text_illustrator.config import settings
from text_illustrator.logging_config import setup_logging
from text_illustrator.plan import build_illustration_plan
from text_illustrator.queries import DescriptorPicker, seeded_picker


# Setup logging
setup_logging()
logger = structlog.get_logger(__name__)

STDIN_MARKER = "-"


class CLIInputError(Exception):
    """Input text or configuration file could not be read."""


# ============================================================================
# CLI FUNCTIONS
# ============================================================================

def read_text(source: str) -> str:
    """
    Read input text from a path, or from stdin when source is "-".

    Raises:
        CLIInputError: If the file cannot be read or decoded
    """
    if source == STDIN_MARKER:
        return sys.stdin.read()

    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CLIInputError(f"Cannot read input {source}: {e}") from e


def load_config_file(path: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Load a JSON query config override.

    Returns None when no path is given. The override itself is validated
    later; an invalid override falls back to the defaults.

    Raises:
        CLIInputError: If the file cannot be read or is not valid JSON
    """
    if not path:
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise CLIInputError(f"Cannot load config {path}: {e}") from e


def process_input(
    source: str,
    config: Optional[Dict[str, Any]] = None,
    picker: Optional[DescriptorPicker] = None,
    verbose: bool = False,
) -> dict:
    """
    Build the illustration plan for one input.

    Args:
        source: File path or "-" for stdin
        config: Query config override
        picker: Descriptor picker
        verbose: Enable verbose output

    Returns:
        Illustration plan as dict, with the input source added
    """
    if verbose:
        logger.info("processing_input", source=source)

    text = read_text(source)
    plan = build_illustration_plan(text, config=config, picker=picker)

    if verbose:
        logger.info(
            "input_processed",
            source=source,
            content_type=plan.content_type.type.value,
            queries_count=len(plan.queries),
        )

    result = plan.model_dump(mode="json")
    result["source"] = source
    return result


def write_output(results: List[dict], output_path: Optional[Path], format: str = "json"):
    """
    Write results to stdout or a file.

    Args:
        results: Illustration plans as dicts
        output_path: Output file path (stdout when None)
        format: Output format ("json" or "jsonl")
    """
    if not output_path:
        if format == "jsonl":
            for result in results:
                print(json.dumps(result, ensure_ascii=False))
        else:
            print(json.dumps(results, ensure_ascii=False, indent=2))
        return

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        if format == "jsonl":
            for result in results:
                f.write(json.dumps(result, ensure_ascii=False) + "\n")
        else:
            json.dump(results, f, ensure_ascii=False, indent=2)

    logger.info("output_written", path=str(output_path), count=len(results))


# ============================================================================
# MAIN CLI
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Text Illustrator CLI - Suggest photo search queries for prose",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single file
  %(prog)s article.txt

  # Read from stdin with reproducible descriptors
  cat article.txt | %(prog)s - --seed 42

  # Custom query configuration (camelCase JSON override)
  %(prog)s article.txt --config queries.json

  # Several files, one plan per line
  %(prog)s a.txt b.txt --format jsonl --output plans.jsonl
        """
    )

    parser.add_argument(
        "inputs",
        nargs="+",
        help="Text file path(s), or '-' to read from stdin"
    )

    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="JSON query config override (default: QUERY_CONFIG_PATH setting)"
    )

    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Seed for descriptor selection, for reproducible queries"
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file path (default: stdout)"
    )

    parser.add_argument(
        "--format",
        "-f",
        type=str,
        choices=["json", "jsonl"],
        default="json",
        help="Output format (default: json)"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output"
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        setup_logging(level="DEBUG")

    picker = seeded_picker(args.seed) if args.seed is not None else None

    try:
        config = load_config_file(args.config or settings.query_config_path)
        results = [
            process_input(source, config=config, picker=picker, verbose=args.verbose)
            for source in args.inputs
        ]
    except CLIInputError as e:
        logger.error("cli_input_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    output_path = Path(args.output) if args.output else None
    write_output(results, output_path, args.format)

    if args.verbose:
        print(f"\n✓ Processed {len(results)} inputs successfully", file=sys.stderr)


if __name__ == "__main__":
    main()
