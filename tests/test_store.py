"""Tests for the in-memory sneaker store."""

from __future__ import annotations

import pytest

from sneakerspider import Sneaker, SneakerStore


def test_store_keeps_insertion_order():
    store = SneakerStore()
    store.append(Sneaker(id=2, title="b"))
    store.append(Sneaker(id=1, title="a"))
    assert [record.title for record in store.all()] == ["b", "a"]
    assert len(store) == 2


def test_get_returns_first_match():
    store = SneakerStore([Sneaker(id=1, title="first"), Sneaker(id=1, title="second")])
    assert store.get(1).title == "first"
    assert store.get(42) is None


def test_sealed_store_rejects_writes():
    store = SneakerStore([Sneaker(id=1)])
    store.seal()
    assert store.sealed
    with pytest.raises(RuntimeError):
        store.append(Sneaker(id=2))
    with pytest.raises(RuntimeError):
        store.extend([Sneaker(id=3)])
    assert len(store) == 1


def test_all_returns_a_copy():
    store = SneakerStore([Sneaker(id=1)])
    snapshot = store.all()
    snapshot.append(Sneaker(id=2))
    assert len(store) == 1
