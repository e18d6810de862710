"""
/**
 * @file translate_relay/controllers/models_controller.py
 * @description 模型列表控制器。
 */
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from translate_relay.services import list_available_models


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/models")
def list_models():
    try:
        return list_available_models()
    except Exception as e:
        logger.error(f"Model listing failed: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})
