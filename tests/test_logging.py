#!/usr/bin/env python

import logging
import sys
import tempfile
import unittest
from io import StringIO
from pathlib import Path
from unittest.mock import patch

sys.path.append(Path(__file__).parents[1].as_posix())
from a_or_an.logging import init_logging, create_filter, DatetimeFormatter, VERBOSE

log = logging.getLogger(__name__)


class LoggingInitTest(unittest.TestCase):
    def _cleanup_handlers(self, *names):
        for name in names:
            logger = logging.getLogger(name)
            while logger.handlers:
                logger.handlers[0].close()
                del logger.handlers[0]

    def test_no_file_by_default(self):
        self.assertIsNone(init_logging(names='test_no_file', streams=False))
        self.assertEqual([], logging.getLogger('test_no_file').handlers)

    def test_log_path(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir, 'nested', 'test.log')
            log_path = init_logging(log_path=path, names='test_file', streams=False)
            self.assertEqual(path, log_path)
            logging.getLogger('test_file').info('hello')
            self._cleanup_handlers('test_file')
            self.assertIn('hello', path.read_text('utf-8'))

    def test_streams_split_by_level(self):
        stdout, stderr = StringIO(), StringIO()
        with patch('sys.stdout', stdout), patch('sys.stderr', stderr):
            init_logging(names='test_streams')
        logger = logging.getLogger('test_streams')
        logger.info('to stdout')
        logger.debug('hidden')
        logger.warning('to stderr')
        self._cleanup_handlers('test_streams')
        self.assertEqual('to stdout\n', stdout.getvalue())
        self.assertEqual('to stderr\n', stderr.getvalue())

    def test_all_streams_to_stderr(self):
        stdout, stderr = StringIO(), StringIO()
        with patch('sys.stdout', stdout), patch('sys.stderr', stderr):
            init_logging(2, names='test_stderr_only', stdout=False)
        logger = logging.getLogger('test_stderr_only')
        logger.debug('debug')
        logger.info('info')
        logger.warning('warning')
        self._cleanup_handlers('test_stderr_only')
        self.assertEqual('', stdout.getvalue())
        self.assertEqual('debug\ninfo\nwarning\n', stderr.getvalue())

    def test_verbosity(self):
        stdout = StringIO()
        with patch('sys.stdout', stdout):
            init_logging(1, names='test_verbosity')
        logger = logging.getLogger('test_verbosity')
        logger.log(VERBOSE, 'verbose')
        logger.debug('debug')
        self._cleanup_handlers('test_verbosity')
        self.assertEqual('verbose\n', stdout.getvalue())
        self.assertEqual('VERBOSE', logging.getLevelName(VERBOSE))


class FormatterTest(unittest.TestCase):
    def test_create_filter(self):
        record = logging.LogRecord('test', logging.ERROR, __file__, 1, 'msg', None, None)
        self.assertTrue(create_filter(lambda r: r.levelno >= logging.WARNING).filter(record))
        self.assertFalse(create_filter(lambda r: r.levelno < logging.WARNING).filter(record))

    def test_millis_date_format(self):
        record = logging.LogRecord('test', logging.INFO, __file__, 1, 'msg', None, None)
        formatted = DatetimeFormatter('%(asctime)s', '%H:%M:%S.%f').format(record)
        self.assertRegex(formatted, r'^\d{2}:\d{2}:\d{2}\.\d{6}$')


if __name__ == '__main__':
    try:
        unittest.main(warnings='ignore', verbosity=2, exit=False)
    except KeyboardInterrupt:
        print()
