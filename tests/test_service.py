"""
Tests for AdviceService and the handler-level id parsing.
"""

import asyncio
import logging

import httpx
import pytest
import pytest_asyncio

from advice_proxy.api.app import create_app
from advice_proxy.errors import InvalidIdentifierError, UpstreamError
from advice_proxy.handlers import parse_advice_id
from advice_proxy.repositories import InMemoryAdviceRepository
from advice_proxy.services import AdviceService
from tests.fakes import FakeAdviceProvider


@pytest.fixture
def provider() -> FakeAdviceProvider:
    return FakeAdviceProvider()


@pytest.fixture
def service(provider) -> AdviceService:
    return AdviceService.create(store=InMemoryAdviceRepository.create(), provider=provider)


@pytest.mark.asyncio
async def test_create_stores_fetched_advice(service):
    advice = await service.create_advice()

    assert advice.id == 1
    assert await service.list_advices() == [advice]


@pytest.mark.asyncio
async def test_failed_fetch_stores_nothing(service, provider):
    provider.fail = True

    with pytest.raises(UpstreamError):
        await service.create_advice()

    assert await service.count() == 0


@pytest.mark.asyncio
async def test_cancelled_fetch_stores_nothing(provider):
    provider.delay = 1.0
    service = AdviceService.create(store=InMemoryAdviceRepository.create(), provider=provider)

    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(service.create_advice(), timeout=0.05)

    assert await service.count() == 0


@pytest.mark.asyncio
async def test_concurrent_creates_keep_every_record(service):
    created = await asyncio.gather(*(service.create_advice() for _ in range(50)))

    ids = {advice.id for advice in await service.list_advices()}
    assert len(ids) == 50
    assert ids == {advice.id for advice in created}


@pytest.mark.asyncio
async def test_delete(service):
    advice = await service.create_advice()

    assert await service.delete_advice(advice.id) is True
    assert await service.delete_advice(advice.id) is False


@pytest.mark.asyncio
async def test_create_and_delete_log_store_size(service, caplog):
    caplog.set_level(logging.INFO, logger="advice_proxy.services.advice_service")

    await service.create_advice()
    await service.create_advice()
    await service.delete_advice(1)

    messages = [record.getMessage() for record in caplog.records]
    assert "Stored advice 1 (1 total)" in messages
    assert "Stored advice 2 (2 total)" in messages
    assert "Deleted advice 1 (1 total)" in messages


@pytest.mark.asyncio
async def test_close_closes_provider(service, provider):
    await service.close()
    assert provider.closed


@pytest.mark.parametrize(
    "raw_id,expected",
    [
        ("0", 0),
        ("42", 42),
        ("+7", 7),
        ("-3", -3),
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
    ],
)
def test_parse_advice_id(raw_id, expected):
    assert parse_advice_id(raw_id) == expected


@pytest.mark.parametrize(
    "raw_id",
    ["", "abc", " 1", "1 ", "1_000", "1.0", "٣", "9223372036854775808", "-9223372036854775809"],
)
def test_parse_advice_id_rejects(raw_id):
    with pytest.raises(InvalidIdentifierError):
        parse_advice_id(raw_id)


@pytest_asyncio.fixture
async def http_client(test_settings, provider):
    """Async client over ASGI so requests can run concurrently."""
    app = create_app(settings=test_settings, advice_provider=provider)
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.mark.asyncio
async def test_concurrent_http_creates(http_client):
    responses = await asyncio.gather(*(http_client.post("/advices") for _ in range(20)))
    assert all(response.status_code == 201 for response in responses)

    listed = (await http_client.get("/advices")).json()
    assert len({item["id"] for item in listed}) == 20


@pytest.mark.asyncio
async def test_concurrent_reads_during_slow_create(http_client, provider):
    await http_client.post("/advices")
    provider.delay = 0.2

    create = asyncio.create_task(http_client.post("/advices"))
    await asyncio.sleep(0.05)
    listed = await http_client.get("/advices")

    assert listed.status_code == 200
    assert [item["id"] for item in listed.json()] == [1]
    assert not create.done()
    assert (await create).status_code == 201
