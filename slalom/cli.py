"""
Command-line interface for slalom.

Exposes the pairing codec and the JSON store for scripting and inspection.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from slalom.codec import decode, encode, isqrt
from slalom.context import get_context
from slalom.logging_config import configure_from_context
from slalom.store import JsonStore


def cmd_encode(a: int, b: int) -> int:
    print(encode(a, b))
    return 0


def cmd_decode(code: int) -> int:
    a, b = decode(code)
    print(f"{a} {b}")
    return 0


def cmd_isqrt(n: int) -> int:
    print(isqrt(n))
    return 0


def cmd_read(store: JsonStore, path: str, fallback_text: str) -> int:
    """Print a document, seeding it with the fallback if it does not exist."""
    fallback = json.loads(fallback_text)
    document = asyncio.run(store.read_json(path, fallback))
    print(json.dumps(document, indent=2, ensure_ascii=False))
    return 0


def cmd_write(store: JsonStore, path: str, value_text: str) -> int:
    value = json.loads(value_text)
    asyncio.run(store.write_json(path, value))
    print(f"OK: wrote {store.resolve(path)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="slalom", description="Slalom utilities")
    p.add_argument(
        "--base-dir", type=Path, help="Base directory for relative document paths"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")

    sub = p.add_subparsers(dest="cmd", required=True)

    enc = sub.add_parser("encode", help="Pair two integers into one")
    enc.add_argument("a", type=int)
    enc.add_argument("b", type=int)

    dec = sub.add_parser("decode", help="Split a code back into its pair")
    dec.add_argument("code", type=int)

    sq = sub.add_parser("isqrt", help="Floor square root of a non-negative integer")
    sq.add_argument("n", type=int)

    rd = sub.add_parser("read", help="Print a JSON document")
    rd.add_argument("path")
    rd.add_argument(
        "--fallback", default="{}", help="JSON used when the document is missing or unreadable"
    )

    wr = sub.add_parser("write", help="Replace a JSON document")
    wr.add_argument("path")
    wr.add_argument("value", help="JSON text to store")

    return p


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    context = get_context()
    if args.json_logs:
        context = replace(context, json_logs=True)
    configure_from_context(context, verbose=args.verbose)

    store = JsonStore(base_dir=args.base_dir or context.base_dir)

    try:
        if args.cmd == "encode":
            return cmd_encode(args.a, args.b)
        elif args.cmd == "decode":
            return cmd_decode(args.code)
        elif args.cmd == "isqrt":
            return cmd_isqrt(args.n)
        elif args.cmd == "read":
            return cmd_read(store, args.path, args.fallback)
        elif args.cmd == "write":
            return cmd_write(store, args.path, args.value)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
