import pytest
from fastapi.testclient import TestClient

from channel_api.errors import ConflictError, UpstreamError
from channel_api.main import create_app


class InMemoryUserStore:
    """Dict-backed credential store; check-and-insert never yields to the loop."""

    def __init__(self):
        self.users = {}

    async def find_user_by_email(self, email):
        return self.users.get(email)

    async def save_user(self, user):
        if user["email"] in self.users:
            raise ConflictError()
        self.users[user["email"]] = dict(user)


class InMemoryChatStore:
    def __init__(self):
        self.records = []

    async def save_chat_record(self, record):
        self.records.append(dict(record))


class StubGateway:
    """Returns a canned answer, or fails like a broken provider."""

    def __init__(self, answer="4", fail=False):
        self.answer = answer
        self.fail = fail
        self.prompts = []

    async def complete(self, prompt):
        self.prompts.append(prompt)
        if self.fail:
            raise UpstreamError()
        return self.answer


@pytest.fixture
def user_store():
    return InMemoryUserStore()


@pytest.fixture
def chat_store():
    return InMemoryChatStore()


@pytest.fixture
def gateway():
    return StubGateway()


@pytest.fixture
def client(user_store, chat_store, gateway):
    app = create_app(user_store=user_store, chat_store=chat_store, gateway=gateway)
    with TestClient(app) as c:
        yield c
