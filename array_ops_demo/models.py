from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class DiscountRecord:
    code: str
    discount: str


@dataclass(slots=True)
class OrderRecord:
    """
    Order line for counting.
    `order` only identifies the line: counting looks at `code` alone.
    """

    order: str
    code: str


@dataclass(slots=True)
class FoldStep:
    """One reduce iteration: combine(previous, current) -> result."""

    previous: Any
    current: Any
    result: Any
