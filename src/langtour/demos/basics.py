# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/langtour/demos/basics.py
from __future__ import annotations

from fractions import Fraction

import numpy as np

from langtour.core.registry import register

S = "constant"


@register("values", help="Strings, integers, floats and booleans")
def demo_values() -> None:
    # Strings concatenate with `+`.
    print("go" + "lang")

    print("1+1 =", 1 + 1)
    print("7.0/3.0 =", 7.0 / 3.0)

    print(True and False)
    print(True or False)
    print(not True)


@register("variables", help="Declarations, inference and zero values")
def demo_variables() -> None:
    a: str = "initial"
    print(a)

    b, c = 1, 2
    print(b, c)

    # Type inferred from the initializer.
    d = True
    print(d)

    # No implicit zero values: each default is spelled out per type.
    e: int = int()
    z_str: str = str()
    z_bool: bool = bool()
    z_float: float = float()
    print(e)
    print(repr(z_str), z_bool, z_float)

    # Assignment expression as the short declare-and-use form.
    print(f := "short")


@register("constants", help="Constants and exact arithmetic")
def demo_constants() -> None:
    print(S)

    N = 400000

    # Exact rational arithmetic; no rounding until a concrete type is asked for.
    d = Fraction(3 * 10**20, N)
    print(d)

    # Explicit conversion to a fixed-width integer.
    x = np.int64(int(d))
    print(x, x.dtype)

    # Used where a float64 is expected, N takes that type.
    print(np.sin(np.float64(N)))
