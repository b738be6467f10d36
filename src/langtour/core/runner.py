# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/langtour/core/runner.py
from __future__ import annotations

from typing import Iterable

from langtour.core.registry import names, select

GREETING = "你好!"


def run(selected: Iterable[str] = (), *, verbose: bool = False) -> list[str]:
    """Print the greeting, then run ``selected`` demos in registry order.

    Returns the names of the demos that ran.
    """
    print(GREETING)
    if isinstance(selected, str):
        selected = [selected]
    demos = select(selected)
    for demo in demos:
        if verbose:
            print(f"== Running {demo.name} ==")
        demo()
    return [demo.name for demo in demos]


def run_all(verbose: bool = False) -> list[str]:
    return run(names(), verbose=verbose)
