from __future__ import annotations

from abc import ABC, abstractmethod
from functools import reduce
from typing import Any, Dict, List, Sequence

from array_ops_demo.models import DiscountRecord, OrderRecord


class UseCase(ABC):
    """
    One transformation written twice: loop + mutable result, and map/filter/reduce.
    Both forms must give the same answer and leave the input untouched.
    """

    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def imperative(self, data: Sequence[Any]) -> Any: ...

    @abstractmethod
    def declarative(self, data: Sequence[Any]) -> Any: ...


class TransformData(UseCase):
    # ["x", "y", "z"] => ["X", "Y", "Z"]

    def name(self) -> str:
        return "TransformData"

    def imperative(self, data: Sequence[str]) -> List[str]:
        result: List[str] = []
        for element in data:
            result.append(element.upper())
        return result

    def declarative(self, data: Sequence[str]) -> List[str]:
        return list(map(lambda element: element.upper(), data))


class TransformAndFilterData(UseCase):
    # prefix="x": ["x", "y", "z"] => ["X"]

    def __init__(self, prefix: str = "x"):
        self.prefix = prefix

    def name(self) -> str:
        return "TransformAndFilterData"

    def imperative(self, data: Sequence[str]) -> List[str]:
        result: List[str] = []
        for element in data:
            if not element.startswith(self.prefix):
                continue
            result.append(element.upper())
        return result

    def declarative(self, data: Sequence[str]) -> List[str]:
        return list(
            map(
                lambda element: element.upper(),
                filter(lambda element: element.startswith(self.prefix), data),
            )
        )


class GroupData(UseCase):
    """
    discount -> codes, in the order the codes were met.
    A new discount starts a one-element list, later codes are appended. No dedup.
    """

    def name(self) -> str:
        return "GroupData"

    def imperative(self, data: Sequence[DiscountRecord]) -> Dict[str, List[str]]:
        result: Dict[str, List[str]] = {}
        for record in data:
            result.setdefault(record.discount, []).append(record.code)
        return result

    def declarative(self, data: Sequence[DiscountRecord]) -> Dict[str, List[str]]:
        # каждый шаг возвращает новый dict, аккумулятор не мутируется
        return reduce(
            lambda grouped, record: {
                **grouped,
                record.discount: grouped.get(record.discount, []) + [record.code],
            },
            data,
            {},
        )


class CountData(UseCase):
    # code -> number of orders; `order` itself is not looked at

    def name(self) -> str:
        return "CountData"

    def imperative(self, data: Sequence[OrderRecord]) -> Dict[str, int]:
        result: Dict[str, int] = {}
        for record in data:
            result[record.code] = result.get(record.code, 0) + 1
        return result

    def declarative(self, data: Sequence[OrderRecord]) -> Dict[str, int]:
        return reduce(
            lambda counts, record: {**counts, record.code: counts.get(record.code, 0) + 1},
            data,
            {},
        )
