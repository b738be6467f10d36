# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/langtour/cli.py
from __future__ import annotations

import argparse
import sys

from langtour.core import registry
from langtour.core.runner import GREETING, run, run_all


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-v", "--verbose", action="store_true", help="Print a header before each demo")


def cmd_run(args: argparse.Namespace) -> None:
    try:
        if args.all:
            run_all(verbose=args.verbose)
        else:
            run(args.demos, verbose=args.verbose)
    except KeyError as exc:
        raise SystemExit(exc.args[0]) from None


def cmd_list(args: argparse.Namespace) -> None:
    for name in registry.names():
        print(f"{name:<20}{registry.get(name).help}")


def cmd_config(args: argparse.Namespace) -> None:
    from langtour.experiments.run_from_config import main

    main(["--config", args.config])


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(prog="langtour", description="Run language-feature demos")
    sub = p.add_subparsers(dest="cmd")

    sp = run_parser = sub.add_parser("run", help="Run the named demos in registry order")
    sp.add_argument("demos", nargs="*", metavar="DEMO", help="Demo names (see `langtour list`)")
    sp.add_argument("--all", action="store_true", help="Run every demo")
    _add_common(sp)
    sp.set_defaults(func=cmd_run)

    sp = sub.add_parser("list", help="List registered demos")
    sp.set_defaults(func=cmd_list)

    sp = sub.add_parser("config", help="Run the demos selected in a YAML config")
    sp.add_argument("--config", required=True, help="Path to YAML config")
    sp.set_defaults(func=cmd_config)

    args = p.parse_args(argv)
    if args.cmd == "run" and args.all and args.demos:
        run_parser.error("--all cannot be combined with demo names")
    if args.cmd is None:
        print(GREETING)
        return 0
    args.func(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
