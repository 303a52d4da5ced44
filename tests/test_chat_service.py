from datetime import datetime, timezone

import pytest

from channel_api.errors import UpstreamError, ValidationError
from channel_api.services.chat_service import ChatService
from conftest import StubGateway


@pytest.mark.asyncio
async def test_empty_question_is_rejected(gateway, chat_store):
    service = ChatService(gateway, chat_store)

    with pytest.raises(ValidationError):
        await service.ask("user@x.com", "")

    assert chat_store.records == []
    assert gateway.prompts == []


@pytest.mark.asyncio
async def test_answer_is_recorded(gateway, chat_store):
    service = ChatService(gateway, chat_store)
    started = datetime.now(timezone.utc)

    answer = await service.ask("user@x.com", "2+2?")

    assert answer == "4"
    assert gateway.prompts == ["2+2?"]
    assert len(chat_store.records) == 1
    record = chat_store.records[0]
    assert record["userEmail"] == "user@x.com"
    assert record["question"] == "2+2?"
    assert record["answer"] == "4"
    assert record["createdAt"] >= started


@pytest.mark.asyncio
async def test_upstream_failure_records_nothing(chat_store):
    service = ChatService(StubGateway(fail=True), chat_store)

    with pytest.raises(UpstreamError):
        await service.ask("user@x.com", "2+2?")

    assert chat_store.records == []
