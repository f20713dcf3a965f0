"""
Tests for Flash - feedback sink with observers and logging.
"""
import logging
import unittest
from unittest.mock import Mock

from resource_browser.ui.Flash import LEVEL_CLEAR, LEVEL_ERROR, LEVEL_INFO, LEVEL_WARN, Flash


class TestFlash(unittest.TestCase):

    def setUp(self):
        self.flash = Flash()
        self.observer = Mock()
        self.flash.register_observer(self.observer)

    def test_initially_clear(self):
        flash = Flash()

        self.assertEqual(flash.level, LEVEL_CLEAR)
        self.assertEqual(flash.message, "")

    def test_info_formats_arguments(self):
        self.flash.info("[%d] %s paused successfully", 1, "deployment")

        self.assertEqual(self.flash.level, LEVEL_INFO)
        self.assertEqual(self.flash.message, "[1] deployment paused successfully")
        self.observer.assert_called_once_with(LEVEL_INFO, "[1] deployment paused successfully")

    def test_info_without_arguments_keeps_percent_signs(self):
        self.flash.info("100% done")

        self.assertEqual(self.flash.message, "100% done")

    def test_warn(self):
        self.flash.warn("careful %s", "now")

        self.observer.assert_called_once_with(LEVEL_WARN, "careful now")

    def test_err_uses_exception_text(self):
        self.flash.err(ValueError("failed to Pause: boom"))

        self.assertEqual(self.flash.level, LEVEL_ERROR)
        self.assertEqual(self.flash.message, "failed to Pause: boom")

    def test_clear(self):
        self.flash.info("x")

        self.flash.clear()

        self.observer.assert_called_with(LEVEL_CLEAR, "")
        self.assertEqual(self.flash.message, "")

    def test_messages_are_logged(self):
        with self.assertLogs('resource_browser.ui.Flash', level=logging.INFO) as logs:
            self.flash.info("hello")
            self.flash.err(RuntimeError("bad"))

        self.assertEqual(len(logs.records), 2)
        self.assertEqual(logs.records[1].levelno, logging.ERROR)


if __name__ == '__main__':
    unittest.main()
