from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from ppemarts import llm_logic, utils


@pytest.fixture(autouse=True)
def no_openai(monkeypatch):
    """Keep tests offline: no key, no cached client, random fallback mode."""
    monkeypatch.setattr(utils, "OPENAI_API_KEY", "")
    monkeypatch.setattr(utils, "RECOMMENDATION_FALLBACK", "random")
    monkeypatch.setattr(llm_logic, "_client", None)


def make_fake_client(content="Wear an N95.", exc=None):
    """Object shaped like OpenAI() for chat.completions.create; returns (client, create_mock)."""
    create = MagicMock()
    if exc is not None:
        create.side_effect = exc
    else:
        message = SimpleNamespace(content=content)
        create.return_value = SimpleNamespace(choices=[SimpleNamespace(message=message)])
    client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    return client, create


@pytest.fixture
def fake_client():
    return make_fake_client
