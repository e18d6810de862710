"""
/**
 * @file translate_relay/utils/__init__.py
 * @description 工具函数导出。
 */
"""

from .validators import ALLOWED_ORIGIN_REGEX, is_allowed_origin, is_api_path, is_json_content_type

__all__ = ["ALLOWED_ORIGIN_REGEX", "is_allowed_origin", "is_api_path", "is_json_content_type"]
