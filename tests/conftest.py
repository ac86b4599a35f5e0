import pytest

from app.orchestrator import Orchestrator
from app.providers.base import GenerationProvider


class FakeProvider(GenerationProvider):
    """Scripted generation service.

    Each queued item is a reply string, an exception to raise, or a callable
    taking the request messages (used to act while the request is in flight).
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def queue(self, *replies):
        self.replies.extend(replies)

    def generate(self, messages):
        self.calls.append(list(messages))
        item = self.replies.pop(0) if self.replies else ""
        if isinstance(item, BaseException):
            raise item
        if callable(item):
            return item(messages)
        return item


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def orchestrator(provider):
    return Orchestrator(provider)


@pytest.fixture
def client(monkeypatch, provider):
    from app import server

    monkeypatch.setattr(server, "provider", provider)
    monkeypatch.setattr(server, "session", Orchestrator(provider))
    server.app.config["TESTING"] = True
    return server.app.test_client()
