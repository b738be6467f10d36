# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/langtour/demos/references.py
"""
Value vs reference parameter passing, and records.

Python rebinding a parameter never reaches the caller, so an explicit
``Ref`` cell stands in for an address: the callee writes through it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from langtour.core.registry import register

T = TypeVar("T")


@dataclass
class Ref(Generic[T]):
    value: T


@dataclass
class Person:
    name: str = ""
    age: int = 0


def zero_val(ival: int) -> None:
    ival = 0  # noqa: F841


def zero_ptr(iptr: Ref[int]) -> None:
    iptr.value = 0


@register("pointers", help="Pass by value vs pass by reference")
def demo_pointers() -> None:
    i = Ref(1)
    print("initial:", i.value)

    zero_val(i.value)
    print("zeroval:", i.value)

    zero_ptr(i)
    print("zeroptr:", i.value)

    print("pointer:", i)


@register("structs", help="Record construction")
def demo_structs() -> None:
    print(Person("Bob", 20))

    print(Person(name="Alice", age=30))

    # Omitted fields take their defaults.
    print(Person(name="Fred"))

    ann = Ref(Person(name="Ann", age=40))
    print(ann)

    # Writes through the reference are seen by every holder.
    alias = ann
    alias.value.age = 41
    print(ann.value.age)
