# src/langtour/experiments/run_from_config.py
from __future__ import annotations
import argparse, sys, yaml

from langtour.core import registry
from langtour.core.runner import run as run_demos

def resolve(demos) -> list[str]:
    if demos is None:
        return []
    if demos == "all":
        return registry.names()
    if isinstance(demos, str):
        return [demos]
    return [str(d) for d in demos]

def run(demos=None, verbose: bool = False) -> list[str]:
    if not isinstance(verbose, bool):
        raise SystemExit(f"verbose must be a YAML boolean (true/false), got {verbose!r}")
    try:
        return run_demos(resolve(demos), verbose=verbose)
    except KeyError as exc:
        raise SystemExit(exc.args[0]) from None

def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="Run langtour demos from YAML config")
    ap.add_argument("--config", required=True, help="Path to YAML config")
    args = ap.parse_args(sys.argv[1:] if argv is None else argv)

    with open(args.config, "r", encoding="utf-8") as fh:
        cfg = yaml.safe_load(fh) or {}

    # Keys other than demos/verbose are ignored.
    run(demos=cfg.get("demos"), verbose=cfg.get("verbose", False))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
