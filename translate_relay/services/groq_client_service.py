"""
/**
 * @file translate_relay/services/groq_client_service.py
 * @description Groq 调用封装（OpenAI 兼容接口）：chat completions / models。
 */
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from translate_relay.config import Settings, load_settings


class UpstreamError(Exception):
    """Raised when the Groq API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GroqClient:
    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        # Settings are fetched on every call so a config reload takes effect immediately
        self._initial_settings = settings
        self._session = session or requests.Session()

    @property
    def settings(self) -> Settings:
        return self._initial_settings or load_settings()

    @property
    def groq_api_key(self) -> Optional[str]:
        return self.settings.resolve_groq_key()

    def _get_headers(self) -> Dict[str, str]:
        key = self.groq_api_key
        if not key:
            raise ValueError("Missing API key. Set GROQ_API_KEY or api_keys.groq in config.local.json")
        return {"Authorization": f"Bearer {key}", "Content-Type": "application/json"}

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and isinstance(error.get("message"), str):
                return error["message"]
        return f"Error code: {response.status_code} - {response.text}"

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.settings.groq_base_url}/{path}"
        response = self._session.request(
            method,
            url,
            headers=self._get_headers(),
            json=payload,
            timeout=self.settings.request_timeout,
        )
        if not 200 <= response.status_code < 300:
            raise UpstreamError(self._error_message(response), status_code=response.status_code)
        data = response.json()
        if not isinstance(data, dict):
            raise UpstreamError(f"Unexpected response from Groq: {data!r}", status_code=response.status_code)
        return data

    def create_chat_completion(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        payload = {
            "messages": messages,
            "model": model or self.settings.translation_model,
            "temperature": self.settings.temperature if temperature is None else temperature,
        }
        return self._request("POST", "chat/completions", payload)

    def list_models(self) -> Dict[str, Any]:
        return self._request("GET", "models")
