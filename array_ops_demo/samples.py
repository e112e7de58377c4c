from __future__ import annotations

from typing import List

from array_ops_demo.models import DiscountRecord, OrderRecord

LETTERS: List[str] = ["a", "b", "c", "d"]
NUMBERS: List[int] = [1, 2, 3, 4]
DIGITS: List[str] = ["1", "2", "3", "4"]

WORDS: List[str] = ["x", "y", "z"]


def discounts() -> List[DiscountRecord]:
    return [
        DiscountRecord(code="A", discount="1"),
        DiscountRecord(code="B", discount="2"),
        DiscountRecord(code="C", discount="1"),
        DiscountRecord(code="E", discount="2"),
        DiscountRecord(code="F", discount="1"),
    ]


def orders() -> List[OrderRecord]:
    return [
        OrderRecord(order="ASDF-123456", code="A"),
        OrderRecord(order="ASDF-123457", code="B"),
        OrderRecord(order="ASDF-123458", code="B"),
        OrderRecord(order="ASDF-123459", code="A"),
        OrderRecord(order="ASDF-123451", code="B"),
    ]
