"""
Run the HTTP API.
"""

import os

import uvicorn

from textispell.core.config import PATH_ENV_VAR


def add_subparser(subparsers):
    parser = subparsers.add_parser("serve", help="Run the textispell HTTP API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.set_defaults(func=run)


def run(args):
    if args.ispell:
        # read by the server's EngineConfig when its session starts
        os.environ[PATH_ENV_VAR] = args.ispell
    uvicorn.run("textispell.server.main:app", host=args.host, port=args.port)
