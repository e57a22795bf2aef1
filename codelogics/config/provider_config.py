from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class ProviderConfig(BaseSettings):
    """Credentials and tuning for the three completion providers.

    Every credential is optional.  A provider without a key is skipped by
    the fallback chain rather than treated as a configuration error.
    """

    # Shared sampling temperature for every provider
    temperature: float = Field(0.7, alias="LLM_TEMPERATURE")

    # ---------------------------------------------------------------------
    # Groq (OpenAI-compatible chat completions)
    groq_api_key: Optional[str] = Field(default=None, alias="GROQ_API_KEY")
    groq_base_url: str = Field("https://api.groq.com/openai/v1", alias="GROQ_BASE_URL")
    groq_model: str = Field("llama-3.3-70b-versatile", alias="GROQ_MODEL")
    groq_max_tokens: int = Field(2000, alias="GROQ_MAX_TOKENS")
    groq_timeout: float = Field(20.0, alias="GROQ_TIMEOUT")

    # ---------------------------------------------------------------------
    # Hugging Face Inference API
    hf_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("HF_API_KEY", "HUGGINGFACE_API_KEY", "hf_api_key"),
    )
    hf_base_url: str = Field("https://api-inference.huggingface.co/models", alias="HF_BASE_URL")
    hf_model: str = Field("codellama/CodeLlama-34b-Instruct-hf", alias="HF_MODEL")
    hf_max_new_tokens: int = Field(1500, alias="HF_MAX_NEW_TOKENS")
    hf_timeout: float = Field(25.0, alias="HF_TIMEOUT")

    # ---------------------------------------------------------------------
    # OpenAI chat completions
    openai_api_key: Optional[str] = Field(default=None, alias="OPENAI_API_KEY")
    openai_base_url: Optional[str] = Field(default=None, alias="OPENAI_BASE_URL")
    openai_model: str = Field("gpt-3.5-turbo", alias="OPENAI_MODEL")
    openai_max_tokens: int = Field(1500, alias="OPENAI_MAX_TOKENS")
    openai_timeout: float = Field(15.0, alias="OPENAI_TIMEOUT")

    @field_validator("groq_api_key", "hf_api_key", "openai_api_key")
    def strip_api_key(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("temperature")
    def validate_temperature(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("LLM_TEMPERATURE must be between 0.0 and 1.0")
        return value

    @field_validator("groq_timeout", "hf_timeout", "openai_timeout")
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Provider timeouts must be positive")
        return value

    @field_validator("groq_max_tokens", "hf_max_new_tokens", "openai_max_tokens")
    def validate_max_tokens(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Provider token limits must be positive")
        return value

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


@lru_cache()
def get_provider_config() -> ProviderConfig:
    """Return a cached provider configuration."""

    return ProviderConfig()
