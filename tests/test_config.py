from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from codelogics.config.app_config import AppConfig
from codelogics.config.provider_config import ProviderConfig
from codelogics.models.enums import ResponseSource
from codelogics.providers import (
    GroqAdapter,
    HuggingFaceAdapter,
    OpenAIAdapter,
    build_default_providers,
)


def test_provider_defaults_match_upstream_limits() -> None:
    config = ProviderConfig.model_validate({})

    assert config.groq_api_key is None
    assert config.hf_api_key is None
    assert config.openai_api_key is None
    assert config.groq_timeout == 20.0
    assert config.hf_timeout == 25.0
    assert config.openai_timeout == 15.0
    assert config.groq_max_tokens == 2000
    assert config.hf_max_new_tokens == 1500
    assert config.openai_max_tokens == 1500
    assert config.temperature == 0.7


def test_huggingface_key_accepts_both_variable_names() -> None:
    assert ProviderConfig.model_validate({"HF_API_KEY": "a"}).hf_api_key == "a"
    assert ProviderConfig.model_validate({"HUGGINGFACE_API_KEY": "b"}).hf_api_key == "b"


def test_blank_keys_are_treated_as_missing() -> None:
    config = ProviderConfig.model_validate({"GROQ_API_KEY": "   ", "OPENAI_API_KEY": " sk-1 "})

    assert config.groq_api_key is None
    assert config.openai_api_key == "sk-1"


def test_out_of_range_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        ProviderConfig.model_validate({"LLM_TEMPERATURE": 1.5})
    with pytest.raises(ValidationError):
        ProviderConfig.model_validate({"GROQ_TIMEOUT": 0})
    with pytest.raises(ValidationError):
        ProviderConfig.model_validate({"OPENAI_MAX_TOKENS": -1})


def test_app_config_parses_cors_origins_and_levels() -> None:
    config = AppConfig.model_validate(
        {"cors_allow_origins": "http://a.test, http://b.test,", "log_level": "debug"}
    )

    assert config.cors_origins == ["http://a.test", "http://b.test"]
    assert config.log_level == "DEBUG"
    assert AppConfig.model_validate({}).cors_origins == ["*"]


def test_app_config_rejects_unknown_environment() -> None:
    with pytest.raises(ValidationError):
        AppConfig.model_validate({"app_env": "qa"})


def test_default_providers_follow_priority_order() -> None:
    config = ProviderConfig.model_validate({"GROQ_API_KEY": "g", "HF_API_KEY": "h"})

    providers = build_default_providers(config)

    assert [type(p) for p in providers] == [GroqAdapter, HuggingFaceAdapter, OpenAIAdapter]
    assert [p.source for p in providers] == [
        ResponseSource.GROQ,
        ResponseSource.HUGGINGFACE,
        ResponseSource.OPENAI,
    ]
    assert [p.configured for p in providers] == [True, True, False]
    assert [p.timeout for p in providers] == [20.0, 25.0, 15.0]
