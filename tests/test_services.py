from types import SimpleNamespace

import anthropic
import httpx
import pytest
import requests

from veoscene.errors import ConfigurationError, TransportError
from veoscene.prompts import ComposedPrompt
from veoscene.services import AnthropicClient, ChatCompletionsClient, create_client
from veoscene.services import anthropic as anthropic_service
from veoscene.services import chat_completions
from veoscene.services.credential import Credential, credential_scope
from veoscene.config import DEFAULT_MODELS, Provider, config

PROMPT = ComposedPrompt(system_text="system layers", user_text="user task")


class FakeResponse:
    def __init__(self, status_code=200, payload=None, json_error=False):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError("not json")
        return self._payload


@pytest.fixture
def captured(monkeypatch):
    calls = []
    responses = []

    def fake_post(url, json=None, headers=None, timeout=None):
        calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        response = responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(chat_completions.requests, "post", fake_post)
    return calls, responses


def make_client():
    return ChatCompletionsClient(
        base_url="https://api.example.com/v1/", model="gpt-4o", timeout=30
    )


def test_request_body():
    body = make_client().build_request(PROMPT)

    assert body == {
        "model": "gpt-4o",
        "messages": [
            {"role": "system", "content": "system layers"},
            {"role": "user", "content": "user task"},
        ],
        "temperature": 0.7,
        "max_tokens": 8000,
        "response_format": {"type": "json_object"},
    }


def test_complete_returns_message_content(captured):
    calls, responses = captured
    responses.append(FakeResponse(payload={"choices": [{"message": {"content": '{"a": 1}'}}]}))

    reply = make_client().complete(PROMPT, Credential("sk-abc"))

    assert reply == '{"a": 1}'
    assert calls[0]["url"] == "https://api.example.com/v1/chat/completions"
    assert calls[0]["headers"]["Authorization"] == "Bearer sk-abc"
    assert calls[0]["timeout"] == 30


def test_error_message_from_service(captured):
    _, responses = captured
    responses.append(FakeResponse(401, payload={"error": {"message": "Incorrect API key provided"}}))

    with pytest.raises(TransportError) as exc_info:
        make_client().complete(PROMPT, Credential("sk-abc"))

    assert exc_info.value.message == "Incorrect API key provided"
    assert exc_info.value.status_code == 401


@pytest.mark.parametrize(
    "response",
    [FakeResponse(500, json_error=True), FakeResponse(502, payload={"detail": "bad gateway"})],
)
def test_error_message_from_status(captured, response):
    _, responses = captured
    responses.append(response)

    with pytest.raises(TransportError) as exc_info:
        make_client().complete(PROMPT, Credential("sk-abc"))

    assert exc_info.value.message == f"API Error: {response.status_code}"


@pytest.mark.parametrize(
    "payload",
    [{}, {"choices": []}, {"choices": [{"message": {"content": ""}}]}, {"choices": [{"message": {}}]}],
)
def test_missing_content(captured, payload):
    _, responses = captured
    responses.append(FakeResponse(payload=payload))

    with pytest.raises(TransportError) as exc_info:
        make_client().complete(PROMPT, Credential("sk-abc"))

    assert exc_info.value.message == "No content received from API"


def test_network_failure(captured):
    _, responses = captured
    responses.append(requests.ConnectionError("boom sk-abc"))

    with pytest.raises(TransportError) as exc_info:
        make_client().complete(PROMPT, Credential("sk-abc"))

    assert "sk-abc" not in exc_info.value.message


def test_released_credential_cannot_be_used():
    credential = Credential("sk-abc")
    credential.release()

    assert credential.released
    with pytest.raises(ConfigurationError):
        credential.secret


def test_credential_scope_releases_on_error():
    with pytest.raises(RuntimeError):
        with credential_scope("sk-abc") as credential:
            raise RuntimeError("failed mid-request")

    assert credential.released
    assert "sk-abc" not in repr(credential)


def test_create_client():
    assert isinstance(create_client(Provider.OPENAI, "gpt-4o-mini"), ChatCompletionsClient)

    client = create_client(Provider.ANTHROPIC, "claude-test")
    assert isinstance(client, AnthropicClient)
    assert client.model == "claude-test"


def test_clients_default_to_configured_model(monkeypatch):
    monkeypatch.setattr(config, "model", "")
    assert ChatCompletionsClient().model == DEFAULT_MODELS[Provider.OPENAI]
    assert AnthropicClient().model == DEFAULT_MODELS[Provider.ANTHROPIC]

    monkeypatch.setattr(config, "model", "custom-model")
    assert ChatCompletionsClient().model == "custom-model"
    assert AnthropicClient().model == "custom-model"
    assert AnthropicClient(model="explicit").model == "explicit"


class FakeAnthropic:
    """Stands in for the SDK client and records how it was used."""

    instances = []
    reply = None

    def __init__(self, **kwargs):
        self.init_kwargs = kwargs
        self.calls = []
        self.closed = False
        self.messages = SimpleNamespace(create=self._create)
        FakeAnthropic.instances.append(self)

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(FakeAnthropic.reply, Exception):
            raise FakeAnthropic.reply
        return FakeAnthropic.reply

    def close(self):
        self.closed = True


@pytest.fixture
def fake_anthropic(monkeypatch):
    FakeAnthropic.instances = []
    FakeAnthropic.reply = None
    monkeypatch.setattr(anthropic_service, "Anthropic", FakeAnthropic)
    return FakeAnthropic


def test_anthropic_joins_text_blocks(fake_anthropic):
    fake_anthropic.reply = SimpleNamespace(
        content=[
            SimpleNamespace(text='{"overview": '),
            SimpleNamespace(type="tool_use"),
            SimpleNamespace(text='"x"}'),
        ]
    )
    client = AnthropicClient(model="claude-test", timeout=30)

    reply = client.complete(PROMPT, Credential("sk-ant-abc"))

    assert reply == '{"overview": "x"}'
    sdk = fake_anthropic.instances[0]
    assert sdk.init_kwargs == {"api_key": "sk-ant-abc", "max_retries": 0, "timeout": 30}
    assert sdk.calls[0]["model"] == "claude-test"
    assert sdk.calls[0]["system"] == "system layers"
    assert sdk.calls[0]["messages"] == [{"role": "user", "content": "user task"}]
    assert sdk.closed


def test_anthropic_status_error(fake_anthropic):
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    fake_anthropic.reply = anthropic.APIStatusError(
        "Invalid x-api-key",
        response=httpx.Response(401, request=request),
        body=None,
    )

    with pytest.raises(TransportError) as exc_info:
        AnthropicClient(model="claude-test").complete(PROMPT, Credential("sk-ant-abc"))

    assert exc_info.value.message == "Invalid x-api-key"
    assert exc_info.value.status_code == 401
    assert fake_anthropic.instances[0].closed
    assert len(fake_anthropic.instances[0].calls) == 1


def test_anthropic_connection_error(fake_anthropic):
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    fake_anthropic.reply = anthropic.APIConnectionError(request=request)

    with pytest.raises(TransportError) as exc_info:
        AnthropicClient(model="claude-test").complete(PROMPT, Credential("sk-ant-abc"))

    assert exc_info.value.message.startswith("Connection error")
    assert exc_info.value.status_code is None


@pytest.mark.parametrize(
    "content",
    [[], [SimpleNamespace(text="")], [SimpleNamespace(type="tool_use")]],
)
def test_anthropic_empty_reply(fake_anthropic, content):
    fake_anthropic.reply = SimpleNamespace(content=content)

    with pytest.raises(TransportError) as exc_info:
        AnthropicClient(model="claude-test").complete(PROMPT, Credential("sk-ant-abc"))

    assert exc_info.value.message == "No content received from API"
