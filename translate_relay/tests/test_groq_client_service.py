"""
/**
 * @file translate_relay/tests/test_groq_client_service.py
 * @description Groq 客户端单元测试（使用 mock session，避免真实网络请求）。
 */
"""

import os
import unittest
from unittest.mock import Mock, patch

from translate_relay.config import Settings
from translate_relay.services.groq_client_service import GroqClient, UpstreamError


def _response(status_code=200, payload=None, text=""):
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


class TestGroqClient(unittest.TestCase):
    def setUp(self):
        self.settings = Settings(
            raw={
                "endpoints": {"groq": "https://groq.test/v1/"},
                "api_keys": {"groq": "secret"},
                "parameters": {"request_timeout": 5},
            }
        )
        self.session = Mock()
        self.client = GroqClient(settings=self.settings, session=self.session)
        env = patch.dict(os.environ, {"GROQ_API_KEY": ""})
        env.start()
        self.addCleanup(env.stop)

    def test_chat_completion_payload(self):
        self.session.request.return_value = _response(payload={"choices": [], "model": "m"})
        messages = [{"role": "user", "content": "hi"}]

        out = self.client.create_chat_completion(messages)

        self.assertEqual(out["model"], "m")
        self.session.request.assert_called_once_with(
            "POST",
            "https://groq.test/v1/chat/completions",
            headers={"Authorization": "Bearer secret", "Content-Type": "application/json"},
            json={"messages": messages, "model": "llama-3.3-70b-versatile", "temperature": 0.3},
            timeout=5.0,
        )

    def test_list_models(self):
        self.session.request.return_value = _response(payload={"object": "list", "data": [{"id": "a"}]})
        self.assertEqual(self.client.list_models()["data"], [{"id": "a"}])
        args, kwargs = self.session.request.call_args
        self.assertEqual(args, ("GET", "https://groq.test/v1/models"))

    def test_error_message_from_body(self):
        self.session.request.return_value = _response(
            status_code=401, payload={"error": {"message": "Invalid API Key", "type": "invalid_request_error"}}
        )
        with self.assertRaises(UpstreamError) as ctx:
            self.client.list_models()
        self.assertEqual(str(ctx.exception), "Invalid API Key")
        self.assertEqual(ctx.exception.status_code, 401)

    def test_error_message_falls_back_to_text(self):
        self.session.request.return_value = _response(status_code=502, payload=ValueError("no json"), text="Bad Gateway")
        with self.assertRaises(UpstreamError) as ctx:
            self.client.create_chat_completion([])
        self.assertEqual(str(ctx.exception), "Error code: 502 - Bad Gateway")

    def test_missing_key_raises_before_request(self):
        client = GroqClient(settings=Settings(raw={}), session=self.session)
        with self.assertRaises(ValueError):
            client.list_models()
        self.session.request.assert_not_called()


if __name__ == "__main__":
    unittest.main()
