import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.ai.config import load_ai_config  # noqa: E402
from resume_analyzer.ai.factory import get_ai_client  # noqa: E402
from resume_analyzer.ai.providers.openai_provider import OpenAIProvider  # noqa: E402
from resume_analyzer.core.config import load_settings  # noqa: E402


class SettingsTests(unittest.TestCase):
    def test_env_values_are_parsed(self):
        env = {
            "LOG_LEVEL": "debug",
            "RATE_LIMIT_ENABLED": "no",
            "MAX_UPLOAD_BYTES": "2048",
            "ANALYSIS_STRICT_VALIDATION": "true",
            "CORS_ALLOWED_ORIGINS": "https://a.example, ,https://b.example",
        }
        with patch.dict(os.environ, env):
            loaded = load_settings()
        self.assertEqual(loaded.log_level, "DEBUG")
        self.assertFalse(loaded.rate_limit_enabled)
        self.assertEqual(loaded.max_upload_bytes, 2048)
        self.assertTrue(loaded.analysis_strict_validation)
        self.assertEqual(loaded.cors_allowed_origins, ("https://a.example", "https://b.example"))

    def test_invalid_int_and_empty_values_fall_back_to_defaults(self):
        with patch.dict(os.environ, {"MAX_UPLOAD_BYTES": "ten", "RATE_LIMIT": ""}):
            loaded = load_settings()
        self.assertEqual(loaded.max_upload_bytes, 10 * 1024 * 1024)
        self.assertEqual(loaded.rate_limit, "30/minute")


class AIConfigTests(unittest.TestCase):
    def test_reads_environment_at_call_time(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-first", "AI_MODEL": "gpt-4o-mini"}):
            first = load_ai_config()
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-second", "AI_MODEL": "gpt-4.1-mini"}):
            second = load_ai_config()
        self.assertEqual(first.api_key, "sk-first")
        self.assertEqual(second.api_key, "sk-second")
        self.assertEqual(second.model, "gpt-4.1-mini")

    def test_defaults(self):
        with patch.dict(os.environ, {"AI_PROVIDER": "", "AI_MODEL": "", "OPENAI_API_KEY": "", "OPENAI_TIMEOUT_S": "x"}):
            cfg = load_ai_config()
        self.assertEqual(cfg.model, "gpt-4o-mini")
        self.assertIsNone(cfg.api_key)
        self.assertEqual(cfg.timeout_s, 30.0)

    def test_factory_builds_openai_provider(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-test", "AI_PROVIDER": "openai"}):
            client = get_ai_client()
        self.assertIsInstance(client, OpenAIProvider)

    def test_factory_rejects_unknown_provider(self):
        with patch.dict(os.environ, {"AI_PROVIDER": "gemini"}):
            with self.assertRaises(ValueError):
                get_ai_client()


if __name__ == "__main__":
    unittest.main()
