# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the langtour project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/langtour/demos/containers.py
from __future__ import annotations

from typing import Any, Iterator, Mapping, Sequence

import numpy as np

from langtour.core.registry import register


# =========================
# (1) Helpers
# =========================

def fixed_array(shape: int | tuple[int, ...]) -> np.ndarray:
    """Zero-valued int array whose shape cannot change (no resize/append)."""
    return np.zeros(shape, dtype=np.int64)


def append(seq: Sequence[Any], *items: Any) -> list[Any]:
    """
    Return a new list holding ``seq`` followed by ``items``.
    The input is left untouched; callers must rebind to the result.
    """
    out = list(seq)
    out.extend(items)
    return out


def lookup(mapping: Mapping[Any, Any], key: Any, zero: Any = 0) -> tuple[Any, bool]:
    """Return ``(value, present)``; absent keys give ``(zero, False)``."""
    if key in mapping:
        return mapping[key], True
    return zero, False


def runes(text: str) -> Iterator[tuple[int, int]]:
    """Yield ``(byte_offset, code_point)`` for each character of UTF-8 ``text``."""
    offset = 0
    for ch in text:
        yield offset, ord(ch)
        offset += len(ch.encode("utf-8"))


# =========================
# (2) Demos
# =========================

@register("arrays", help="Fixed-size arrays, 2D and 3D")
def demo_arrays() -> None:
    a = fixed_array(5)
    print("emp:", a)

    a[4] = 100
    print("set:", a)
    print("get:", a[4])

    print("len:", len(a))

    two_d = fixed_array((2, 3))
    for i in range(2):
        for j in range(3):
            two_d[i, j] = i + j
    print("2d:", two_d.tolist())

    three_d = fixed_array((2, 3, 4))
    for i in range(2):
        for j in range(3):
            for k in range(4):
                three_d[i, j, k] = i + j + k
    print("3d:", three_d.tolist())


@register("slices", help="Dynamic sequences: append, copy, slicing, ragged nesting")
def demo_slices() -> None:
    s = [""] * 3
    print("emp:", s)

    s[0] = "a"
    s[1] = "b"
    s[2] = "c"
    print("set:", s)
    print("get:", s[2])
    print("len:", len(s))

    s = append(s, "d")
    s = append(s, "e", "f")
    print("app:", s)

    c = s.copy()
    c[0] = "z"
    print("cpy:", c, "orig:", s)

    # Half-open: start included, stop excluded.
    print("sl1:", s[2:5])
    print("sl2:", s[:5])
    print("sl3:", s[2:])

    t = ["g", "h", "i"]
    print("dcl:", t)

    two_d = []
    for i in range(3):
        inner_len = i + 1
        two_d.append([i + j for j in range(inner_len)])
    print("2d:", two_d)


@register("maps", help="Dicts: insert, lookup with presence, delete")
def demo_maps() -> None:
    m: dict[str, int] = {}

    m["k1"] = 7
    m["k2"] = 13
    print("map:", m)

    v1 = m["k1"]
    print("v1:", v1)
    print("len:", len(m))

    del m["k2"]
    print("map:", m)

    _, prs = lookup(m, "k2")
    print("prs:", prs)

    for some_key in ("missing_key", "k1"):
        print("Testing key:", some_key)
        value, key_exists = lookup(m, some_key)
        if key_exists:
            print("Key " + some_key + " exists.")
        else:
            print("Key " + some_key + " does NOT exist.")
        print("Value is:", value)

    n = {"foo": 1, "bar": 2}
    print("map:", n)


@register("range", help="Iterating sequences, dicts and strings")
def demo_range() -> None:
    nums = [2, 3, 4]
    total = 0
    for num in nums:
        total += num
    print("sum:", total)

    for i, num in enumerate(nums):
        if num == 3:
            print("index:", i)

    kvs = {"a": "apple", "b": "banana"}
    for k, v in kvs.items():
        print(f"{k} -> {v}")

    for k in kvs:
        print("key:", k)

    for i, c in runes("go"):
        print(i, c)
