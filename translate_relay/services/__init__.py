"""
/**
 * @file translate_relay/services/__init__.py
 * @description 业务服务层导出。
 */
"""

from .groq_client_service import GroqClient, UpstreamError
from .model_registry_service import list_available_models
from .translation_service import LANGUAGE_NAMES, translate_text

__all__ = [
    "GroqClient",
    "UpstreamError",
    "LANGUAGE_NAMES",
    "list_available_models",
    "translate_text",
]
