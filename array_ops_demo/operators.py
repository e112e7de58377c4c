"""
map / filter / reduce on the talk's sample data.

None of them mutate the input: each call returns a new value.
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Iterable, List, Sequence

from array_ops_demo.models import FoldStep

_NO_INITIAL = object()


def uppercase_letters(letters: Iterable[str]) -> List[str]:
    # ["a", "b", "c", "d"] => ["A", "B", "C", "D"]
    return list(map(lambda element: element.upper(), letters))


def greater_than(numbers: Iterable[float], threshold: float = 2) -> List[float]:
    # [1, 2, 3, 4] => [3, 4]
    return list(filter(lambda element: element > threshold, numbers))


def sum_numbers(numbers: Iterable[float]) -> float:
    """
    Left fold without an initial value: the first element is the first `previous`.
    An empty input raises TypeError (reduce has nothing to start from).
    """
    return reduce(lambda previous, current: previous + current, numbers)


def concat_strings(strings: Iterable[str], initial: str = "") -> str:
    # ["1", "2", "3", "4"] => "1234", not 10: "+" on str concatenates
    return reduce(lambda previous, current: previous + current, strings, initial)


def fold_steps(
    function: Callable[[Any, Any], Any],
    values: Sequence[Any],
    initial: Any = _NO_INITIAL,
) -> List[FoldStep]:
    """
    Every iteration reduce would perform, in order.

    Without `initial` the walk starts at the second element with the first one
    as `previous`, so one element gives no steps and an empty input raises TypeError.
    """
    items = list(values)
    if initial is _NO_INITIAL:
        if not items:
            raise TypeError("fold_steps() of empty sequence with no initial value")
        previous, items = items[0], items[1:]
    else:
        previous = initial

    steps: List[FoldStep] = []
    for current in items:
        result = function(previous, current)
        steps.append(FoldStep(previous=previous, current=current, result=result))
        previous = result
    return steps
