import logging
import unittest
from unittest.mock import patch

from trending_repos.config import ConfigurationError, configure_logging, load_client_settings, load_settings


class TestLoadSettings(unittest.TestCase):
    def setUp(self) -> None:
        patcher = patch("trending_repos.config.load_dotenv")
        self.load_dotenv = patcher.start()
        self.addCleanup(patcher.stop)

    def test_defaults(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            settings = load_settings()

        self.assertEqual(settings.port, 3000)
        self.assertEqual(settings.host, "0.0.0.0")
        self.assertEqual(settings.github_api_url, "https://api.github.com")
        self.assertEqual(settings.log_level, "INFO")
        self.load_dotenv.assert_called_once()

    def test_environment_overrides(self) -> None:
        env = {"PORT": "8080", "HOST": "127.0.0.1", "GITHUB_API_URL": "http://localhost:9000", "LOG_LEVEL": "DEBUG"}
        with patch.dict("os.environ", env, clear=True):
            settings = load_settings()

        self.assertEqual(settings.port, 8080)
        self.assertEqual(settings.host, "127.0.0.1")
        self.assertEqual(settings.github_api_url, "http://localhost:9000")
        self.assertEqual(settings.log_level, "DEBUG")

    def test_empty_port_falls_back_to_default(self) -> None:
        with patch.dict("os.environ", {"PORT": ""}, clear=True):
            self.assertEqual(load_settings().port, 3000)

    def test_invalid_port_raises(self) -> None:
        for port in ["abc", "0", "70000"]:
            with self.subTest(port=port):
                with patch.dict("os.environ", {"PORT": port}, clear=True):
                    with self.assertRaises(ConfigurationError) as ctx:
                        load_settings()
                self.assertIn("PORT", str(ctx.exception))

    def test_client_settings_ignore_server_only_variables(self) -> None:
        env = {"PORT": "abc", "HOST": "", "GITHUB_API_URL": "http://localhost:9000"}
        with patch.dict("os.environ", env, clear=True):
            settings = load_client_settings()

        self.assertEqual(settings.github_api_url, "http://localhost:9000")
        self.assertIsNone(settings.log_level)
        self.assertFalse(hasattr(settings, "port"))
        self.load_dotenv.assert_called_once()

    def test_client_settings_read_log_level(self) -> None:
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}, clear=True):
            self.assertEqual(load_client_settings().log_level, "DEBUG")


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        logging.getLogger().handlers.clear()

    def test_sets_root_level(self) -> None:
        configure_logging("warning")
        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_unknown_level_defaults_to_info(self) -> None:
        configure_logging("chatty")
        self.assertEqual(logging.getLogger().level, logging.INFO)
