"""Tests for the single-instance store."""

from __future__ import annotations

import pytest

from mvvmd.core.single_instance import (
    SingleInstanceError,
    SingleInstanceStore,
    get_instance_store,
)


class Widget:
    def __init__(self, name: str = "widget"):
        self.name = name


class TestSingleInstanceStore:
    def test_create_stores_instance(self, store: SingleInstanceStore) -> None:
        widget = store.create(Widget, name="w1")

        assert widget.name == "w1"
        assert store.get(Widget) is widget
        assert Widget in store
        assert len(store) == 1

    def test_second_create_fails(self, store: SingleInstanceStore) -> None:
        first = store.create(Widget)

        with pytest.raises(SingleInstanceError) as exc_info:
            store.create(Widget)

        assert exc_info.value.cls is Widget
        assert store.get(Widget) is first

    def test_claim_existing_object(self, store: SingleInstanceStore) -> None:
        widget = Widget()
        store.claim(widget)

        assert store.get(Widget) is widget
        with pytest.raises(SingleInstanceError):
            store.claim(Widget())

    def test_release_allows_recreation(self, store: SingleInstanceStore) -> None:
        first = store.create(Widget)
        store.release(Widget)

        assert Widget not in store
        assert store.create(Widget) is not first

    def test_release_unknown_is_noop(self, store: SingleInstanceStore) -> None:
        store.release(Widget)

        assert len(store) == 0

    def test_failed_constructor_leaves_no_entry(self, store: SingleInstanceStore) -> None:
        with pytest.raises(TypeError):
            store.create(Widget, unexpected=True)

        assert Widget not in store

    def test_clear(self, store: SingleInstanceStore) -> None:
        store.create(Widget)
        store.clear()

        assert store.get(Widget) is None

    def test_global_store_is_shared(self) -> None:
        assert get_instance_store() is get_instance_store()
