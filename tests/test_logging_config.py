# tests/test_logging_config.py

import logging
import unittest

from city_guide.core.logging_config import configure_logging, logger


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self):
        configure_logging("INFO")

    def test_level_is_applied(self):
        configure_logging("debug")
        self.assertEqual(logger.level, logging.DEBUG)

    def test_unknown_level_keeps_info(self):
        configure_logging("chatty")
        self.assertEqual(logger.level, logging.INFO)

    def test_app_factory_applies_setting(self):
        from city_guide.main import create_app
        from tests.support import make_settings

        create_app(make_settings(LOG_LEVEL="WARNING"))
        self.assertEqual(logger.level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
