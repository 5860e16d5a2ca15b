"""Element-wise helpers for cost vectors represented as plain lists."""

from __future__ import annotations

import math
from itertools import product
from numbers import Integral
from typing import List, Sequence, TypeVar

T = TypeVar("T")

CostVec = List[float]


def vec_add(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the element-wise sum of ``a`` and ``b``."""
    return [x + y for x, y in zip(a, b)]


def vec_sub(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the element-wise difference ``a - b``."""
    return [x - y for x, y in zip(a, b)]


def scale(k: float, a: Sequence[float]) -> list[float]:
    """Multiply every component of ``a`` by the scalar ``k``."""
    return [k * x for x in a]


def norm_l2(a: Sequence[float]) -> float:
    """Euclidean length of ``a``."""
    return math.sqrt(sum(x * x for x in a))


def normalize(a: Sequence[float]) -> list[float]:
    """Return ``a`` scaled to unit Euclidean length."""
    norm = norm_l2(a)
    if norm == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return scale(1.0 / norm, a)


def inner_product(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of ``a`` and ``b``."""
    return sum(x * y for x, y in zip(a, b))


def init_vec(dim: int = 0, val: float = 0.0) -> list[float]:
    """Create a vector of ``dim`` copies of ``val``."""
    return [val] * dim


def lex_compare(v1: Sequence[float], v2: Sequence[float]) -> int:
    """Lexicographic comparison: -1 if v1 < v2, 0 if equal, 1 if v1 > v2."""
    for x, y in zip(v1, v2):
        if x < y:
            return -1
        if x > y:
            return 1
    return 0


def eps_dom(
    v1: Sequence[float], v2: Sequence[float], eps: float = 0.0, less: bool = True
) -> bool:
    """Epsilon dominance of ``v1`` over ``v2``; with ``eps=0`` this is weak dominance."""
    for x, y in zip(v1, v2):
        bound = (1.0 + eps) * y
        if less and x > bound:
            return False
        if not less and x < bound:
            return False
    return True


def vec_equal(v1: Sequence[float], v2: Sequence[float]) -> bool:
    """True when every component of ``v1`` equals the matching one in ``v2``."""
    return all(x == y for x, y in zip(v1, v2))


def elementwise_min(v1: Sequence[float], v2: Sequence[float]) -> list[float]:
    """Component-wise minimum; components beyond ``v1`` come from ``v2``."""
    out = list(v2)
    for i, (x, y) in enumerate(zip(v1, v2)):
        if x < y:
            out[i] = x
    return out


def elementwise_max(v1: Sequence[float], v2: Sequence[float]) -> list[float]:
    """Component-wise maximum; components beyond ``v1`` come from ``v2``."""
    out = list(v2)
    for i, (x, y) in enumerate(zip(v1, v2)):
        if x > y:
            out[i] = x
    return out


def take_combination(ivec: Sequence[Sequence[T]]) -> list[list[T]]:
    """Every way of picking one element from each sub-sequence.

    The choice from the first sub-sequence changes fastest.
    """
    return [list(reversed(combo)) for combo in product(*reversed(ivec))]


def _fmt_scalar(x: float) -> str:
    if isinstance(x, Integral):
        return str(int(x))
    return f"{x:f}"


def vec_to_str(c: Sequence[float]) -> str:
    """Render a vector as ``[a,b,...]`` with six decimals for floats."""
    return "[" + ",".join(_fmt_scalar(x) for x in c) + "]"