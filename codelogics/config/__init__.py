"""Configuration objects loaded from the environment and ``.env``."""

from .app_config import AppConfig, get_app_config  # noqa: F401
from .provider_config import ProviderConfig, get_provider_config  # noqa: F401
