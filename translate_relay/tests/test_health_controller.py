import os
import unittest
from unittest.mock import patch

from translate_relay.config import Settings
from translate_relay.controllers.health_controller import health


class TestHealthController(unittest.TestCase):
    @patch("translate_relay.controllers.health_controller.load_settings")
    def test_key_not_configured(self, mock_settings):
        mock_settings.return_value = Settings(raw={})
        with patch.dict(os.environ, {"GROQ_API_KEY": ""}):
            self.assertEqual(health(), {"status": "OK", "groqApiConfigured": False})

    @patch("translate_relay.controllers.health_controller.load_settings")
    def test_key_configured(self, mock_settings):
        mock_settings.return_value = Settings(raw={})
        with patch.dict(os.environ, {"GROQ_API_KEY": "gsk_test"}):
            self.assertEqual(health(), {"status": "OK", "groqApiConfigured": True})


if __name__ == "__main__":
    unittest.main()
