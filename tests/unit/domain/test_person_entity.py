"""Tests for the Person entity."""

import pytest

from contador.domain.entities.person import Person
from contador.domain.exceptions import StorageError


def test_incremented_returns_new_instance():
    p = Person(id="ana-1", name="Ana", count=3)
    bumped = p.incremented()
    assert bumped.count == 4
    assert p.count == 3
    assert bumped.id == p.id and bumped.name == p.name


def test_to_dict_field_order():
    assert list(Person(id="a", name="A").to_dict()) == ["id", "name", "count"]


def test_from_dict_valid():
    p = Person.from_dict({"id": "ana-1", "name": "Ana", "count": 2})
    assert p == Person(id="ana-1", name="Ana", count=2)


def test_from_dict_missing_count_rejected():
    with pytest.raises(StorageError, match="invalid count"):
        Person.from_dict({"id": "x", "name": "X"})


@pytest.mark.parametrize(
    "raw",
    [
        "ana",
        None,
        {"name": "Ana", "count": 0},
        {"id": "", "name": "Ana", "count": 0},
        {"id": "a", "name": 3, "count": 0},
        {"id": "a", "name": "Ana", "count": -1},
        {"id": "a", "name": "Ana", "count": "1"},
        {"id": "a", "name": "Ana", "count": True},
    ],
)
def test_from_dict_rejects_bad_shapes(raw):
    with pytest.raises(StorageError):
        Person.from_dict(raw)
