"""Shared pytest fixtures for shapeguard tests."""

import pytest


class CustomClass:
    """Plain class used as a non-data object in guard tests."""

    def __init__(self):
        self.name = "xyz"


class CountingPredicate:
    """Predicate that records every value it is asked about."""

    def __init__(self, result: bool = True):
        self.result = result
        self.calls: list[object] = []

    def __call__(self, value: object) -> bool:
        self.calls.append(value)
        return self.result


@pytest.fixture
def custom_instance() -> CustomClass:
    return CustomClass()


@pytest.fixture
def string_list() -> list[str]:
    return ["xyz", "abc", "123"]


@pytest.fixture
def number_list() -> list[int]:
    return [1, 2, 3]


@pytest.fixture
def record_list() -> list[dict[str, int]]:
    return [{"name": 1}, {"name": 2}, {"name": 3}]


@pytest.fixture
def passing_predicate() -> CountingPredicate:
    return CountingPredicate(result=True)


@pytest.fixture
def failing_predicate() -> CountingPredicate:
    return CountingPredicate(result=False)
