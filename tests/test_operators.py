"""Tests for map / filter / reduce examples."""
from operator import add

import pytest

from array_ops_demo.models import FoldStep
from array_ops_demo.operators import concat_strings, fold_steps, greater_than, sum_numbers, uppercase_letters


def test_map_uppercases_every_letter():
    letters = ["a", "b", "c", "d"]

    result = uppercase_letters(letters)

    assert result == ["A", "B", "C", "D"]
    assert letters == ["a", "b", "c", "d"]  # input untouched


def test_map_keeps_length_and_order():
    letters = ["q", "Ab", "", "z1"]

    result = uppercase_letters(letters)

    assert len(result) == len(letters)
    assert all(result[i] == letters[i].upper() for i in range(len(letters)))


def test_filter_keeps_elements_above_threshold():
    assert greater_than([1, 2, 3, 4]) == [3, 4]
    assert greater_than([4, 1, 3, 2], threshold=0) == [4, 1, 3, 2]
    assert greater_than([1, 2], threshold=5) == []


def test_reduce_without_initial_value():
    assert sum_numbers([1, 2, 3, 4]) == 10
    assert sum_numbers([7]) == 7


def test_reduce_without_initial_value_on_empty_input_raises():
    with pytest.raises(TypeError):
        sum_numbers([])


def test_reduce_with_initial_value_concatenates_strings():
    assert concat_strings(["1", "2", "3", "4"]) == "1234"
    assert concat_strings([]) == ""
    assert concat_strings(["b", "c"], initial="a") == "abc"


def test_fold_steps_without_initial_start_from_first_element():
    steps = fold_steps(add, [1, 2, 3, 4])

    assert steps == [
        FoldStep(previous=1, current=2, result=3),
        FoldStep(previous=3, current=3, result=6),
        FoldStep(previous=6, current=4, result=10),
    ]


def test_fold_steps_with_initial_visit_every_element():
    steps = fold_steps(add, ["1", "2", "3", "4"], "")

    assert len(steps) == 4
    assert steps[0] == FoldStep(previous="", current="1", result="1")
    assert steps[-1].result == "1234"


def test_fold_steps_edge_cases():
    assert fold_steps(add, [5]) == []
    assert fold_steps(add, [], 0) == []
    with pytest.raises(TypeError):
        fold_steps(add, [])
