from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import httpx
import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from codelogics.config.provider_config import ProviderConfig
from codelogics.providers import chat_completion
from codelogics.providers.chat_completion import GroqAdapter, OpenAIAdapter
from codelogics.providers.huggingface import HuggingFaceAdapter, extract_generated_text
from codelogics.prompts.system import GROQ_SYSTEM_PROMPT


class FakeReply:
    def __init__(self, content: Any) -> None:
        self.content = content


class FakeLLM:
    def __init__(self, reply: Any = None, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[list[Any]] = []

    def invoke(self, messages: list[Any]) -> FakeReply:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return FakeReply(self.reply)


def make_groq(api_key: str | None = "gsk-test") -> GroqAdapter:
    config = ProviderConfig.model_validate({"GROQ_API_KEY": api_key})
    return GroqAdapter.from_config(config)


def make_hf(handler, api_key: str | None = "hf-test") -> HuggingFaceAdapter:
    return HuggingFaceAdapter(
        api_key,
        model="codellama/CodeLlama-34b-Instruct-hf",
        base_url="https://hf.test/models",
        temperature=0.7,
        max_new_tokens=1500,
        timeout=25.0,
        transport=httpx.MockTransport(handler),
    )


# ---------------------------------------------------------------------------
# Chat completion adapters


def test_chat_adapter_without_key_makes_no_request(monkeypatch: pytest.MonkeyPatch) -> None:
    built: list[dict[str, Any]] = []
    monkeypatch.setattr(chat_completion, "ChatOpenAI", lambda **kwargs: built.append(kwargs))

    assert make_groq(api_key=None).call("write a function") is None
    assert built == []


def test_chat_adapter_returns_text_unchanged() -> None:
    adapter = make_groq()
    llm = FakeLLM(reply="  Here is the code:\n```python\npass\n```  ")
    adapter._build_llm = lambda: llm

    assert adapter.call("write a function") == "  Here is the code:\n```python\npass\n```  "

    messages = llm.calls[0]
    assert messages[0].type == "system"
    assert messages[0].content == GROQ_SYSTEM_PROMPT
    assert messages[1].type == "human"
    assert messages[1].content == "write a function"


def test_chat_adapter_keeps_braces_in_prompt() -> None:
    adapter = make_groq()
    llm = FakeLLM(reply="ok")
    adapter._build_llm = lambda: llm

    adapter.call("what does {x: 1} mean in javascript")

    assert llm.calls[0][1].content == "what does {x: 1} mean in javascript"


@pytest.mark.parametrize("reply", ["", "   ", None, [{"type": "text", "text": "hi"}]])
def test_chat_adapter_without_text_is_unavailable(reply: Any) -> None:
    adapter = make_groq()
    adapter._build_llm = lambda: FakeLLM(reply=reply)

    assert adapter.call("write a function") is None


def test_chat_adapter_swallows_client_errors() -> None:
    adapter = make_groq()
    adapter._build_llm = lambda: FakeLLM(error=TimeoutError("took too long"))

    assert adapter.call("write a function") is None


def test_chat_client_is_built_once_without_retries(monkeypatch: pytest.MonkeyPatch) -> None:
    built: list[dict[str, Any]] = []

    def fake_chat_openai(**kwargs: Any) -> FakeLLM:
        built.append(kwargs)
        return FakeLLM(reply="done")

    monkeypatch.setattr(chat_completion, "ChatOpenAI", fake_chat_openai)
    adapter = OpenAIAdapter.from_config(ProviderConfig.model_validate({"OPENAI_API_KEY": "sk-test"}))

    assert adapter.call("first") == "done"
    assert adapter.call("second") == "done"
    assert len(built) == 1
    assert built[0]["max_retries"] == 0
    assert built[0]["timeout"] == 15.0
    assert built[0]["max_tokens"] == 1500
    assert built[0]["temperature"] == 0.7
    assert built[0]["model"] == "gpt-3.5-turbo"
    assert "base_url" not in built[0]


def test_groq_adapter_targets_groq_endpoint(monkeypatch: pytest.MonkeyPatch) -> None:
    built: list[dict[str, Any]] = []

    def fake_chat_openai(**kwargs: Any) -> FakeLLM:
        built.append(kwargs)
        return FakeLLM(reply="done")

    monkeypatch.setattr(chat_completion, "ChatOpenAI", fake_chat_openai)

    assert make_groq().call("write a function") == "done"
    assert built[0]["base_url"] == "https://api.groq.com/openai/v1"
    assert built[0]["model"] == "llama-3.3-70b-versatile"
    assert built[0]["max_tokens"] == 2000
    assert built[0]["timeout"] == 20.0


# ---------------------------------------------------------------------------
# Hugging Face adapter


def test_hf_adapter_sends_prompt_with_bearer_token() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"generated_text": "Sure! ```js\nx\n```"}])

    assert make_hf(handler).call("sort an array") == "Sure! ```js\nx\n```"

    request = seen[0]
    assert str(request.url) == "https://hf.test/models/codellama/CodeLlama-34b-Instruct-hf"
    assert request.headers["Authorization"] == "Bearer hf-test"
    body = json.loads(request.content)
    assert "sort an array" in body["inputs"]
    assert body["parameters"] == {
        "max_new_tokens": 1500,
        "temperature": 0.7,
        "return_full_text": False,
    }


def test_hf_adapter_accepts_object_response() -> None:
    adapter = make_hf(lambda request: httpx.Response(200, json={"generated_text": "answer"}))

    assert adapter.call("sort an array") == "answer"


def test_hf_adapter_without_key_makes_no_request() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"generated_text": "answer"}])

    assert make_hf(handler, api_key="").call("sort an array") is None
    assert seen == []


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(503, json={"error": "Model is currently loading"}),
        httpx.Response(401, json={"error": {"message": "bad token"}}),
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=[]),
        httpx.Response(200, json=[{"generated_text": ""}]),
        httpx.Response(200, json={"unexpected": "shape"}),
    ],
)
def test_hf_adapter_failures_are_unavailable(response: httpx.Response) -> None:
    adapter = make_hf(lambda request: response)

    assert adapter.call("sort an array") is None


def test_hf_adapter_timeout_is_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    assert make_hf(handler).call("sort an array") is None


def test_extract_generated_text_shapes() -> None:
    assert extract_generated_text([{"generated_text": "a"}, {"generated_text": "b"}]) == "a"
    assert extract_generated_text({"generated_text": "c"}) == "c"
    assert extract_generated_text([]) is None
    assert extract_generated_text("plain") is None
    assert extract_generated_text({"generated_text": 3}) is None
