"""
Tests for the in-memory advice store.
"""

import asyncio
import random

import pytest

from advice_proxy.entities import AdviceEntity
from advice_proxy.protocols import AdviceStore
from advice_proxy.repositories import InMemoryAdviceRepository


@pytest.fixture
def repository() -> InMemoryAdviceRepository:
    return InMemoryAdviceRepository.create()


def test_satisfies_protocol(repository):
    assert isinstance(repository, AdviceStore)


@pytest.mark.asyncio
async def test_starts_empty(repository):
    assert await repository.list_all() == []
    assert await repository.count() == 0


@pytest.mark.asyncio
async def test_insert_then_list_round_trips(repository):
    advice = AdviceEntity(id=42, text="Don't feed the trolls.")
    await repository.insert(advice)

    stored = await repository.list_all()
    assert stored == [advice]
    assert stored[0].id == 42
    assert stored[0].text == "Don't feed the trolls."


@pytest.mark.asyncio
async def test_insert_same_id_replaces(repository):
    await repository.insert(AdviceEntity(id=7, text="first"))
    await repository.insert(AdviceEntity(id=7, text="second"))

    assert await repository.list_all() == [AdviceEntity(id=7, text="second")]


@pytest.mark.asyncio
async def test_remove_present(repository):
    await repository.insert(AdviceEntity(id=1, text="a"))
    await repository.insert(AdviceEntity(id=2, text="b"))

    assert await repository.remove(1) is True
    assert await repository.list_all() == [AdviceEntity(id=2, text="b")]


@pytest.mark.asyncio
async def test_remove_absent_leaves_store_unchanged(repository):
    await repository.insert(AdviceEntity(id=1, text="a"))
    before = await repository.list_all()

    assert await repository.remove(999) is False
    assert await repository.list_all() == before


@pytest.mark.asyncio
async def test_list_is_a_snapshot(repository):
    await repository.insert(AdviceEntity(id=1, text="a"))

    snapshot = await repository.list_all()
    snapshot.clear()
    await repository.insert(AdviceEntity(id=2, text="b"))

    assert snapshot == []
    assert {advice.id for advice in await repository.list_all()} == {1, 2}


@pytest.mark.asyncio
async def test_random_sequence_matches_model(repository):
    """list() is exactly the ids inserted and not yet removed."""
    rng = random.Random(1234)
    expected: dict[int, str] = {}

    for step in range(300):
        advice_id = rng.randrange(20)
        if rng.random() < 0.6:
            text = f"advice {step}"
            await repository.insert(AdviceEntity(id=advice_id, text=text))
            expected[advice_id] = text
        else:
            removed = await repository.remove(advice_id)
            assert removed is (expected.pop(advice_id, None) is not None)

        stored = await repository.list_all()
        assert {advice.id: advice.text for advice in stored} == expected


@pytest.mark.asyncio
async def test_concurrent_inserts_are_not_lost(repository):
    await asyncio.gather(
        *(repository.insert(AdviceEntity(id=i, text=str(i))) for i in range(200))
    )

    assert await repository.count() == 200
    assert {advice.id for advice in await repository.list_all()} == set(range(200))
