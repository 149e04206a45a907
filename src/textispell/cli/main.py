"""
textispell CLI.
"""

import argparse
import logging

from textispell.cli.commands import check, word, serve


def main():
    parser = argparse.ArgumentParser(prog="textispell", description="ispell from the command line")
    parser.add_argument("--ispell", metavar="PATH", help="ispell executable (default: $TEXTISPELL_PATH or /usr/local/bin/ispell)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine traffic")
    subparsers = parser.add_subparsers(dest="command")
    
    check.add_subparser(subparsers)
    word.add_subparser(subparsers)
    serve.add_subparser(subparsers)
    
    args = parser.parse_args()
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
