"""
Spellcheck files or stdin.
"""

import json
import sys

import httpx
from rich import print_json

from textispell.cli import client
from textispell.cli.speller import make_speller
from textispell.core.errors import TextIspellError
from textispell.core.response import Result, ResultType


def add_subparser(subparsers):
    parser = subparsers.add_parser(
        "check",
        help="Spellcheck files (or stdin) line by line."
    )
    parser.add_argument("files", nargs="*", help="Files to check (default: stdin).")
    parser.add_argument("--terse", action="store_true", help="Only report misspelled words.")
    parser.add_argument("--json", action="store_true", help="Print results as JSON.")
    parser.add_argument("--remote", metavar="URL", help="Use a running textispell server, e.g. http://localhost:8000/api")
    parser.set_defaults(func=run)


def describe(r: Result) -> str | None:
    """One human-readable line per result; None for correct words."""
    if r.type == ResultType.OK:
        return None
    elif r.type == ResultType.ROOT:
        return f"root: '{r.term}' can be formed from '{r.root}'"
    elif r.type == ResultType.COMPOUND:
        return f"compound: '{r.term}'"
    elif r.type == ResultType.MISS:
        return f"miss: '{r.term}' @{r.offset} -> {', '.join(r.misses)}"
    elif r.type == ResultType.GUESS:
        return f"guess: '{r.term}' @{r.offset} -> {', '.join(r.guesses)}"
    elif r.type == ResultType.NONE:
        return f"none: '{r.term}' @{r.offset}"
    elif r.type == ResultType.UNKNOWN:
        return f"unknown: '{r.term}' ({r.commentary})"
    raise AssertionError(f"unhandled result type {r.type}")


def read_inputs(files: list[str]) -> list[tuple[str, str]]:
    if not files:
        return [("<stdin>", sys.stdin.read())]
    inputs = []
    for path in files:
        with open(path, encoding="utf-8") as f:
            inputs.append((path, f.read()))
    return inputs


def check_local(args, inputs: list[tuple[str, str]]) -> dict[str, list[list[dict]]]:
    with make_speller(args) as speller:
        if args.terse:
            speller.enter_terse_mode()
        return {
            name: [[r.to_dict() for r in line] for line in speller.check_text(text)]
            for name, text in inputs
        }


def run(args):
    try:
        inputs = read_inputs(args.files)
        if args.remote:
            report = {
                name: client.spellcheck(text, terse=args.terse, base_url=args.remote)
                for name, text in inputs
            }
        else:
            report = check_local(args, inputs)
    except (TextIspellError, OSError, httpx.HTTPError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    
    if args.json:
        print_json(json.dumps(report))
        return
    
    problems = 0
    for name, lines in report.items():
        for lineno, results in enumerate(lines, start=1):
            for d in results:
                line = describe(Result.from_dict(d))
                if line is None:
                    continue
                if d["type"] in ("miss", "guess", "none"):
                    problems += 1
                print(f"{name}:{lineno}: {line}")
    
    if problems:
        sys.exit(1)

