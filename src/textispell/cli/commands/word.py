"""
Personal dictionary commands.
"""

import sys

import httpx

from textispell.cli import client
from textispell.cli.speller import make_speller
from textispell.core.errors import TextIspellError


def add_subparser(subparsers):
    parser = subparsers.add_parser("word", help="Personal dictionary management")
    word_sub = parser.add_subparsers(dest="word_command", required=True)
    
    # add
    add_p = word_sub.add_parser("add", help="Add a word to the personal dictionary")
    add_p.add_argument("word", help="Word to add")
    add_p.add_argument("--lower", action="store_true", help="Add in lower case (match any capitalization)")
    add_p.add_argument("--save", action="store_true", help="Write the personal dictionary to disk afterwards")
    add_p.add_argument("--remote", metavar="URL", help="Use a running textispell server")
    add_p.set_defaults(func=word_add)
    
    # accept
    accept_p = word_sub.add_parser("accept", help="Accept a word for the server's session")
    accept_p.add_argument("word", help="Word to accept")
    accept_p.add_argument("--remote", metavar="URL", default=client.BASE_URL, help="textispell server URL")
    accept_p.set_defaults(func=word_accept)


def word_add(args):
    try:
        if args.remote:
            client.add_word(args.word, lowercase=args.lower, base_url=args.remote)
            if args.save:
                client.save_dictionary(base_url=args.remote)
        else:
            with make_speller(args) as speller:
                if args.lower:
                    speller.add_word_lowercase(args.word)
                else:
                    speller.add_word(args.word)
                if args.save:
                    speller.save_dictionary()
        print(f"✓ Added: {args.word}")
    except (TextIspellError, httpx.HTTPError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def word_accept(args):
    # only meaningful against a long-lived session
    try:
        client.accept_word(args.word, base_url=args.remote)
        print(f"✓ Accepted: {args.word}")
    except httpx.HTTPError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
