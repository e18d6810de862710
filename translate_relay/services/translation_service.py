"""
/**
 * @file translate_relay/services/translation_service.py
 * @description 医学翻译服务（基于 Groq chat completions）。
 */
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List, Optional

from translate_relay.services.groq_client_service import GroqClient


LANGUAGE_NAMES = MappingProxyType(
    {
        "en-US": "English",
        "es": "Spanish",
        "fr": "French",
        "de": "German",
        "zh": "Chinese",
        "ar": "Arabic",
        "hi": "Hindi",
        "pt": "Portuguese",
        "ru": "Russian",
        "ja": "Japanese",
    }
)


def resolve_language_name(code: str) -> str:
    # 未知代码原样返回
    return LANGUAGE_NAMES.get(code, code)


def build_messages(text: str, source_lang: str, target_lang: str) -> List[Dict[str, str]]:
    source_language = resolve_language_name(source_lang)
    target_language = resolve_language_name(target_lang)
    return [
        {
            "role": "system",
            "content": (
                "You are a professional medical translator. "
                f"Translate from {source_language} to {target_language}. Return ONLY the translation."
            ),
        },
        {"role": "user", "content": text},
    ]


def extract_translated_text(completion: Dict[str, Any]) -> Optional[str]:
    """Return choices[0].message.content stripped, or None when the shape differs."""
    choices = completion.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first_choice = choices[0]
    if not isinstance(first_choice, dict):
        return None
    message = first_choice.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if not isinstance(content, str):
        return None
    return content.strip()


def translate_text(text: str, source_lang: str, target_lang: str, client: Optional[GroqClient] = None) -> Dict[str, Any]:
    h = client or GroqClient()
    completion = h.create_chat_completion(build_messages(text, source_lang, target_lang))

    result = {
        "translatedText": extract_translated_text(completion),
        "sourceLang": source_lang,
        "targetLang": target_lang,
        "model": completion.get("model"),
        "usage": completion.get("usage"),
    }
    # absent values are left out of the response body
    return {k: v for k, v in result.items() if v is not None}
