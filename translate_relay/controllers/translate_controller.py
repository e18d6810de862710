"""
/**
 * @file translate_relay/controllers/translate_controller.py
 * @description 翻译控制器（医学文本翻译，转发至 Groq）。
 */
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from translate_relay.models.translate_request_model import TranslateRequest
from translate_relay.services import translate_text


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/translate")
def translate(req: TranslateRequest):
    missing = req.missing_fields()
    if missing:
        logger.info(f"Translate request rejected, missing: {', '.join(missing)}")
        return JSONResponse(status_code=400, content={"error": "Missing required fields"})

    try:
        return translate_text(req.text, req.source_lang, req.target_lang)
    except Exception as e:
        logger.error(f"API Error: {e}")
        return JSONResponse(status_code=500, content={"error": "Translation failed", "details": str(e)})
