"""
/**
 * @file translate_relay/models/translate_request_model.py
 * @description 翻译请求模型（Pydantic）。
 */
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TranslateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # 字段均可为空，缺失校验在控制器中统一返回 400
    text: Optional[str] = None
    source_lang: Optional[str] = Field(None, alias="sourceLang")
    target_lang: Optional[str] = Field(None, alias="targetLang")

    def missing_fields(self) -> List[str]:
        fields = {"text": self.text, "sourceLang": self.source_lang, "targetLang": self.target_lang}
        return [name for name, value in fields.items() if not value]
