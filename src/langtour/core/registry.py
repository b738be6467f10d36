# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/langtour/core/registry.py
from __future__ import annotations

from dataclasses import dataclass
from importlib import import_module
from typing import Callable, Iterable

# Module order fixes registry order.
DEMO_MODULES = ["basics", "flow", "containers", "functions", "references"]


@dataclass(frozen=True)
class Demo:
    name: str
    func: Callable[[], None]
    help: str = ""

    def __call__(self) -> None:
        self.func()


_REGISTRY: dict[str, Demo] = {}


def register(name: str, help: str = "") -> Callable[[Callable[[], None]], Callable[[], None]]:
    """Decorator adding a zero-argument demo routine under ``name``."""

    def deco(func: Callable[[], None]) -> Callable[[], None]:
        if name in _REGISTRY:
            raise ValueError(f"Demo already registered: {name}")
        _REGISTRY[name] = Demo(name=name, func=func, help=help)
        return func

    return deco


def load_all() -> None:
    for module_name in DEMO_MODULES:
        import_module(f"langtour.demos.{module_name}")


def _rank(demo: Demo) -> int:
    module_name = demo.func.__module__.rpartition(".")[2]
    return DEMO_MODULES.index(module_name) if module_name in DEMO_MODULES else len(DEMO_MODULES)


def _ordered() -> list[Demo]:
    # Module order, then definition order; independent of import order.
    return sorted(_REGISTRY.values(), key=_rank)


def names() -> list[str]:
    load_all()
    return [demo.name for demo in _ordered()]


def get(name: str) -> Demo:
    load_all()
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown demo: {name} (choose from: {', '.join(names())})") from None


def select(requested: Iterable[str]) -> list[Demo]:
    """Resolve ``requested`` names to demos, de-duplicated, in registry order."""
    wanted = {get(n).name for n in requested}
    return [demo for demo in _ordered() if demo.name in wanted]
