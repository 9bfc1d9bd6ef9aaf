"""Tests for :mod:`authgate.app_logging`."""

from unittest import TestCase
from io import StringIO
import json
import logging

from authgate.app_logging import setup_logger


class TestSetupLogger(TestCase):
    """Log records are written as JSON objects."""

    def setUp(self):
        self.stream = StringIO()

    def tearDown(self):
        logging.getLogger().removeHandler(self.handler)

    def test_json_records(self):
        """Each record is a JSON document with renamed fields."""
        self.handler = setup_logger(logging.INFO, stream=self.stream)
        logging.getLogger('authgate.interceptor').info('Invalid token: %s',
                                                      'expired')
        record = json.loads(self.stream.getvalue().splitlines()[-1])
        self.assertEqual(record['level'], 'INFO')
        self.assertEqual(record['name'], 'authgate.interceptor')
        self.assertEqual(record['message'], 'Invalid token: expired')
        self.assertIn('timestamp', record)

    def test_plain_records(self):
        """JSON output can be turned off."""
        self.handler = setup_logger(logging.INFO, json_format=False,
                                    stream=self.stream)
        logging.getLogger('authgate').info('hello')
        self.assertIn('INFO authgate: hello', self.stream.getvalue())
