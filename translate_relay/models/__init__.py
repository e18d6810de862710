"""
/**
 * @file translate_relay/models/__init__.py
 * @description 数据模型导出。
 */
"""

from .translate_request_model import TranslateRequest

__all__ = ["TranslateRequest"]
