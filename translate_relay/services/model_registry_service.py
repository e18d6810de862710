"""
/**
 * @file translate_relay/services/model_registry_service.py
 * @description 模型列表服务：透传 Groq 的模型列表。
 */
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from translate_relay.services.groq_client_service import GroqClient


def list_available_models(client: Optional[GroqClient] = None) -> Dict[str, Any]:
    h = client or GroqClient()
    data = h.list_models().get("data")
    if data is None:
        return {}
    return {"models": data}
