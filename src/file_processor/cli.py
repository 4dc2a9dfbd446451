"""Command-line interface for the file processor."""

import argparse
import logging
import sys

from file_processor.config import DEFAULT_INPUT_FILE, ProcessorConfig
from file_processor.coordinator import main_process


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="file-processor",
        description="Uppercase every line of a text file on a fixed thread pool.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=DEFAULT_INPUT_FILE,
        help=f"Path to the input text file (default: {DEFAULT_INPUT_FILE})",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker threads (default: 5, env FP_POOL_SIZE)",
    )

    parser.add_argument(
        "--chunks",
        type=int,
        default=None,
        help="Number of chunks to split the lines into (default: 10, env FP_NUM_CHUNKS)",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for workers before cancelling (default: 60, env FP_TIMEOUT_SECONDS)",
    )

    parser.add_argument(
        "--encoding",
        default=None,
        help="Input file encoding (default: utf-8, env FP_ENCODING)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit 1 when the input is missing and 2 on timeout instead of 0",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    try:
        config = ProcessorConfig.from_env().with_overrides(
            pool_size=args.workers,
            num_chunks=args.chunks,
            timeout_seconds=args.timeout,
            encoding=args.encoding,
        )
    except ValueError as exc:
        parser.error(str(exc))

    return main_process(
        input_path=args.input_file,
        config=config,
        strict=args.strict,
    )


if __name__ == "__main__":
    sys.exit(main())
