import logging
import unittest

from rich.logging import RichHandler

from driverdiag.logger import setup_logging


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger("driverdiag")
        self.saved = (list(self.logger.handlers), self.logger.level, self.logger.propagate)

    def tearDown(self):
        handlers, level, propagate = self.saved
        self.logger.handlers[:] = handlers
        self.logger.setLevel(level)
        self.logger.propagate = propagate

    def test_installs_single_rich_handler(self):
        setup_logging(level=logging.DEBUG)
        handler = setup_logging(level=logging.DEBUG)

        self.assertIsInstance(handler, RichHandler)
        self.assertEqual(self.logger.handlers, [handler])
        self.assertEqual(self.logger.level, logging.DEBUG)
        self.assertFalse(self.logger.propagate)

    def test_markup_disabled(self):
        handler = setup_logging()

        self.assertFalse(handler.markup)


if __name__ == "__main__":
    unittest.main()
