#!/usr/bin/env python3
"""
Command-line hardware comparison: two CPUs or two GPUs, one collaborator call.
Requires OPENAI_API_KEY or ANTHROPIC_API_KEY unless --provider mock.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from config import DEFAULT_CLI_LOG_DIR, DEFAULT_PROVIDER, KINDS, PROVIDERS, missing_key_message
from errors import ComparisonError, ValidationError, user_message
from pipeline import run_pipeline
from renderer import RenderedComparison, render_comparison

_MARKS = {"winner": " *", "loser": "", "neutral": ""}


def format_table(rendered: RenderedComparison) -> str:
    """Plain-text spec table; '*' marks the better value of a row."""
    header = ("Specification", rendered.name1, rendered.name2)
    body = [
        (row.label, f"{row.value1}{_MARKS[row.style1]}", f"{row.value2}{_MARKS[row.style2]}")
        for row in rendered.rows
    ]
    widths = [max(len(str(r[i])) for r in [header, *body]) for i in range(3)]
    lines = [" | ".join(str(c).ljust(w) for c, w in zip(header, widths))]
    lines.append("-+-".join("-" * w for w in widths))
    for r in body:
        lines.append(" | ".join(str(c).ljust(w) for c, w in zip(r, widths)))
    lines.append("")
    for card in rendered.cards:
        lines.append(f"{card.title}: {card.label}")
    lines.append("")
    lines.append(rendered.recommendation)
    return "\n".join(lines)


def run_compare(args: argparse.Namespace) -> int:
    log_dir: Path | None = args.log_dir if args.log else None
    try:
        result = run_pipeline(args.kind, args.name1, args.name2, provider_id=args.provider, log_dir=log_dir)
    except ValidationError as e:
        for slot, msg in sorted(e.field_errors.items()):
            print(f"{KINDS[args.kind].slot_label} {slot}: {msg}", file=sys.stderr)
        return 2
    except ComparisonError as e:
        print(f"Error ({type(e).__name__}): {user_message(e)}", file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps(result.to_payload(), indent=2))
    else:
        print(format_table(render_comparison(result)))
    if log_dir is not None:
        print("Logged to", log_dir, file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare two CPUs or two GPUs side by side")
    parser.add_argument("kind", choices=list(KINDS), help="cpu or gpu")
    parser.add_argument("name1", help="First model name")
    parser.add_argument("name2", help="Second model name")
    parser.add_argument("--provider", choices=list(PROVIDERS), default=DEFAULT_PROVIDER if DEFAULT_PROVIDER in PROVIDERS else "openai")
    parser.add_argument("--json", action="store_true", help="Print the parsed comparison as JSON")
    parser.add_argument("--log", action="store_true", help="Write audit log")
    parser.add_argument("--log-dir", type=Path, default=DEFAULT_CLI_LOG_DIR, help="Audit log directory (with --log)")
    args = parser.parse_args(argv)
    key_msg = missing_key_message(args.provider)
    if key_msg:
        print(f"Error: {key_msg}", file=sys.stderr)
        return 1
    return run_compare(args)


if __name__ == "__main__":
    sys.exit(main())
