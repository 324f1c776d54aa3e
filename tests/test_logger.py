#!/usr/bin/env python3
"""Test suite for logging configuration"""

import logging
import os
import tempfile
import unittest

from pynvec.logger import (
    PACKAGE_LOGGER,
    LogContext,
    LoggerConfig,
    LogLevel,
    get_logger,
    level_value,
    logger_config,
    setup_logger,
    setup_logger_from_config,
)
from pynvec.spherical.sloop import Loop

TEST_LOGGER = "pynvec.tests.logger"


class TestLevels(unittest.TestCase):
    """Test level names"""

    def test_level_value(self):
        self.assertEqual(logging.DEBUG, level_value("DEBUG"))
        self.assertEqual(logging.WARNING, level_value("warning"))
        self.assertEqual(LogLevel.TRACE.value, level_value("Trace"))

    def test_unknown_level(self):
        with self.assertRaises(ValueError):
            level_value("VERBOSE")

    def test_trace_level_registered(self):
        self.assertEqual("TRACE", logging.getLevelName(LogLevel.TRACE.value))
        self.assertTrue(hasattr(logging.getLogger(TEST_LOGGER), "trace"))


class TestSetupLogger(unittest.TestCase):
    """Test logger setup"""

    def tearDown(self):
        for name in (TEST_LOGGER, PACKAGE_LOGGER):
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers = []
            logger.setLevel(logging.NOTSET)

    def test_console(self):
        logger = setup_logger(TEST_LOGGER, "DEBUG")
        self.assertEqual(logging.DEBUG, logger.level)
        self.assertEqual(1, len(logger.handlers))
        self.assertIsInstance(logger.handlers[0], logging.StreamHandler)

    def test_setup_replaces_handlers(self):
        setup_logger(TEST_LOGGER, "DEBUG")
        logger = setup_logger(TEST_LOGGER, "INFO")
        self.assertEqual(1, len(logger.handlers))
        self.assertEqual(logging.INFO, logger.level)

    def test_file(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "pynvec.log")
            logger = setup_logger(TEST_LOGGER, "TRACE", log_file=path, console=False)
            logger.trace("ear clipping %d vertices", 5)
            logger.debug("not a trace message")
            for handler in logger.handlers:
                handler.flush()
                handler.close()
            logger.handlers = []
            with open(path) as f:
                content = f.read()
        self.assertIn("TRACE", content)
        self.assertIn("ear clipping 5 vertices", content)
        self.assertIn("not a trace message", content)

    def test_unknown_level(self):
        with self.assertRaises(ValueError):
            setup_logger(TEST_LOGGER, "LOUD")

    def test_module_loggers_reach_package_logger(self):
        with self.assertLogs(PACKAGE_LOGGER, level=logging.DEBUG) as cm:
            Loop.new([])
        self.assertEqual(["DEBUG:pynvec.spherical.sloop:Empty loop: 0 distinct vertices"], cm.output)


class TestLogContext(unittest.TestCase):
    """Test temporary level changes"""

    def test_restores_level(self):
        logger = get_logger(TEST_LOGGER)
        logger.setLevel(logging.WARNING)
        with LogContext(logger, "DEBUG") as l:
            self.assertIs(logger, l)
            self.assertEqual(logging.DEBUG, logger.level)
        self.assertEqual(logging.WARNING, logger.level)

    def test_restores_level_on_error(self):
        logger = get_logger(TEST_LOGGER)
        logger.setLevel(logging.ERROR)
        with self.assertRaises(RuntimeError):
            with LogContext(logger, "TRACE"):
                raise RuntimeError("boom")
        self.assertEqual(logging.ERROR, logger.level)

    def test_unknown_level(self):
        with self.assertRaises(ValueError):
            LogContext(get_logger(TEST_LOGGER), "NOISY")


class TestLoggerConfig(unittest.TestCase):
    """Test configuration from a dictionary"""

    def test_configure_from_dict(self):
        config = LoggerConfig()
        config.configure_from_dict({
            'default_level': 'WARNING',
            'console': False,
            'module_levels': {'pynvec.spherical.sloop': 'DEBUG'},
        })
        self.assertEqual('WARNING', config.default_level)
        self.assertFalse(config.console)
        self.assertEqual('DEBUG', config.get_level_for_module('pynvec.spherical.sloop'))
        self.assertEqual('WARNING', config.get_level_for_module('pynvec.spherical.cap'))

    def test_invalid_levels(self):
        config = LoggerConfig()
        with self.assertRaises(ValueError):
            config.set_default_level('SHOUT')
        with self.assertRaises(ValueError):
            config.set_module_level('pynvec.spherical.cpa', 'WHISPER')
        self.assertEqual('INFO', config.default_level)
        self.assertEqual({}, config.module_levels)

    def test_setup_from_config(self):
        self.addCleanup(self._reset)
        setup_logger_from_config({
            'default_level': 'WARNING',
            'console': True,
            'module_levels': {TEST_LOGGER: 'DEBUG'},
        })
        self.assertEqual(logging.WARNING, logging.getLogger(PACKAGE_LOGGER).level)
        module_logger = logging.getLogger(TEST_LOGGER)
        self.assertEqual(logging.DEBUG, module_logger.level)
        self.assertEqual(1, len(module_logger.handlers))

    def _reset(self):
        logger_config.module_levels = {}
        logger_config.default_level = "INFO"
        logger_config.log_file = None
        logger_config.console = True
        for name in (TEST_LOGGER, PACKAGE_LOGGER):
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers = []
            logger.setLevel(logging.NOTSET)


if __name__ == '__main__':
    unittest.main()
