# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/langtour/demos/flow.py
"""Loops, conditionals and multi-way branching."""
from __future__ import annotations

from datetime import date, datetime

from langtour.core.registry import register


def weekday_kind(day: date) -> str:
    match day.weekday():
        case 5 | 6:  # Saturday, Sunday
            return "It's the weekend!"
        case _:
            return "It's a weekday..."


def time_of_day(now: datetime) -> str:
    # Predicate-only branching: no subject, first true condition wins.
    if now.hour < 12:
        return "It's before noon!"
    return "It's after noon!!"


def what_i_am(value: object) -> str:
    """Branch on the runtime kind of ``value``.

    ``bool`` is checked before ``int`` since ``bool`` subclasses ``int``.
    """
    match value:
        case bool():
            return "I'm a bool."
        case int():
            return "I'm an int."
        case _:
            return f"Don't know type {type(value).__name__}"


@register("for", help="Condition-only, counter, infinite and continue loops")
def demo_for() -> None:
    i = 1
    while i <= 3:
        print(i)
        i = i + 1

    for j in range(7, 10):
        print(j)

    while True:
        print("loop")
        break

    for n in range(12):
        if n % 2 == 0:
            continue
        print(n)


@register("if-else", help="if / else / elif with a scoped initializer")
def demo_if_else() -> None:
    if 7 % 2 == 0:
        print("7 is even")
    else:
        print("7 is odd")

    if 8 % 4 == 0:
        print("8 is divisible by 4")

    # `num` is bound by the condition and visible in every branch.
    if (num := 9) < 0:
        print(num, "is negative")
    elif num < 10:
        print(num, "has 1 digit")
    else:
        print(num, "has multiple digits")


@register("switch", help="Value, multi-value, predicate and type branching")
def demo_switch(now: datetime | None = None) -> None:
    now = datetime.now() if now is None else now

    i = 2
    match i:
        case 1:
            word = "one"
        case 2:
            word = "two"
        case 3:
            word = "three"
        case _:
            word = str(i)
    print("Write", i, "as", word)

    print(weekday_kind(now.date()))
    print(time_of_day(now))

    for value in (True, 12, "hey"):
        print(what_i_am(value))
