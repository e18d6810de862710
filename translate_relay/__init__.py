"""
/**
 * @file translate_relay/__init__.py
 * @description 医学翻译中继服务（FastAPI + Groq）。
 */
"""

__version__ = "1.0.0"
