# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/langtour/demos/functions.py
"""Plain, variadic, closure-returning and recursive functions."""
from __future__ import annotations

from typing import Callable

from langtour.core.registry import register


def plus(a: int, b: int) -> int:
    return a + b


def plus_plus(a: int, b: int, c: int) -> int:
    return a + b + c


def vals() -> tuple[int, int]:
    return 3, 7


def total(*nums: int) -> int:
    result = 0
    for num in nums:
        result += num
    return result


def int_seq(start: int) -> Callable[[], int]:
    """Return a counter that adds one to its own copy of ``start`` per call."""
    i = start

    def next_int() -> int:
        nonlocal i
        i += 1
        return i

    return next_int


def fact(n: int) -> int:
    if n == 0:
        return 1
    return n * fact(n - 1)


@register("functions", help="Arity, grouped parameters, multiple returns")
def demo_functions() -> None:
    res = plus(1, 2)
    print("1+2=", res)

    res = plus_plus(1, 2, 3)
    print("1+2+3=", res)

    a, b = vals()
    print(a)
    print(b)

    _, c = vals()
    print(c)


@register("variadic-functions", help="*args and spreading a list")
def demo_variadic_functions() -> None:
    def sum_(*nums: int) -> None:
        print(list(nums), "Total:", total(*nums))

    sum_(1, 2)
    sum_(1, 2, 3)

    nums = [1, 2, 3, 4, 5, 6, 7]
    sum_(*nums)


@register("closures", help="Counters closing over their own state")
def demo_closures() -> None:
    next_int = int_seq(10)
    print(next_int())
    print(next_int())
    print(next_int())

    # Separate call, separate state.
    new_ints = int_seq(100)
    print(new_ints())


@register("recursion", help="Factorial")
def demo_recursion() -> None:
    print(fact(7))
