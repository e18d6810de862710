"""
/**
 * @file translate_relay/controllers/health_controller.py
 * @description 健康检查控制器。
 */
"""

from fastapi import APIRouter

from translate_relay.config import load_settings


router = APIRouter()


@router.get("/api/health")
def health():
    settings = load_settings()
    return {"status": "OK", "groqApiConfigured": bool(settings.resolve_groq_key())}
