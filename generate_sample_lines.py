#!/usr/bin/env python3
"""
Sample input generator for file processor runs.

Writes a newline-delimited file of deterministic pseudo-random lowercase
words, suitable as data.txt for manual and timing runs.
"""

import argparse
import random
import string
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB


def generate_line(rng: random.Random, words: int, max_word_len: int) -> str:
    """Build one line of space-separated lowercase words."""
    return " ".join(
        "".join(rng.choices(string.ascii_lowercase, k=rng.randint(1, max_word_len)))
        for _ in range(words)
    )


def generate_sample_file(
    output_path: str,
    num_lines: int,
    words_per_line: int,
    max_word_len: int,
    seed: int,
) -> int:
    """
    Generate a sample input file.

    Streams output line-by-line to avoid holding it in memory.

    Returns:
        Total number of lines written.
    """
    rng = random.Random(seed)
    total_lines = 0

    with open(output_path, "w", encoding="utf-8", buffering=BUFFER_SIZE) as f:
        for i in range(num_lines):
            f.write(generate_line(rng, words_per_line, max_word_len) + "\n")
            total_lines += 1

            # Progress indicator every 1M lines
            if (i + 1) % 1_000_000 == 0:
                print(f"  Generated {i + 1:,}/{num_lines:,} lines...", file=sys.stderr)

    return total_lines


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a sample input file for the file processor.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default data.txt with 100k lines
  python generate_sample_lines.py --out data.txt

  # Larger file with longer lines
  python generate_sample_lines.py --out data/large.txt --lines 5000000 --words 12
""",
    )

    parser.add_argument("--out", required=True, help="Output file path")
    parser.add_argument(
        "--lines",
        type=int,
        default=100_000,
        help="Number of lines to write (default: 100000)",
    )
    parser.add_argument(
        "--words",
        type=int,
        default=6,
        help="Words per line (default: 6)",
    )
    parser.add_argument(
        "--max-word-len",
        type=int,
        default=10,
        help="Maximum word length (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    if args.lines < 0:
        parser.error("--lines must be non-negative")
    if args.words < 1:
        parser.error("--words must be at least 1")
    if args.max_word_len < 1:
        parser.error("--max-word-len must be at least 1")

    print(f"Writing {args.lines:,} lines to {args.out}...", file=sys.stderr)
    total_lines = generate_sample_file(
        output_path=args.out,
        num_lines=args.lines,
        words_per_line=args.words,
        max_word_len=args.max_word_len,
        seed=args.seed,
    )
    print(f"Done! Wrote {total_lines:,} lines to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
