"""Unit tests for the object pool."""

import pytest

from src.benchmark.object_pool import ObjectPool


class Item:
    def __init__(self):
        self.value = 0
        self.resets = 0

    def reset(self):
        self.value = 0
        self.resets += 1


class TestObjectPool:
    """Test acquire/release discipline."""

    def test_reuses_released_object(self):
        """A released object is handed out again."""
        pool = ObjectPool(Item, Item.reset)

        with pool.acquire() as first:
            first.value = 42
        with pool.acquire() as second:
            pass

        assert second is first
        assert second.value == 0
        assert pool.created == 1

    def test_release_on_error(self):
        """The object goes back to the pool when the block raises."""
        pool = ObjectPool(Item, Item.reset)

        with pytest.raises(RuntimeError):
            with pool.acquire() as item:
                raise RuntimeError("boom")

        assert pool.idle == 1
        assert item.resets == 1

    def test_release_exactly_once(self):
        """Leaving the block resets the object exactly once."""
        pool = ObjectPool(Item, Item.reset, max_idle=2)

        with pool.acquire() as item:
            pass

        assert item.resets == 1
        assert pool.idle == 1

    def test_nested_acquire_creates_second_object(self):
        """Objects in use are never shared."""
        pool = ObjectPool(Item, max_idle=2)

        with pool.acquire() as first, pool.acquire() as second:
            assert first is not second

        assert pool.created == 2
        assert pool.idle == 2

    def test_idle_objects_are_bounded(self):
        """Releases beyond max_idle are dropped."""
        pool = ObjectPool(Item, max_idle=1)

        with pool.acquire(), pool.acquire(), pool.acquire():
            pass

        assert pool.created == 3
        assert pool.idle == 1
