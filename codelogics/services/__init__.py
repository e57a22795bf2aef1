"""Business logic: topic classification, local templates and the fallback chain."""

from .code_service import CodeService, get_code_service  # noqa: F401
from .template_service import TemplateService  # noqa: F401
from .topic_classifier import classify_topic, is_development_related  # noqa: F401
