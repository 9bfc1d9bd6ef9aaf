"""API tests for the authentication gate service."""

from unittest import TestCase, mock
import json
import logging
import os

from authgate.factory import create_app
from authgate.services import authentication


class TestCheck(TestCase):
    """The ``/auth/check`` endpoint is gated like any other route."""

    @mock.patch.dict(os.environ, {'AUTH_SERVER_URL': 'http://auth:8080',
                                  'AUTH_SERVER_TIMEOUT': '1.5'})
    def setUp(self):
        self.app = create_app()
        self.client = self.app.test_client()

    def test_config_from_environment(self):
        """Configuration is read from the environment."""
        self.assertEqual(self.app.config['AUTH_SERVER_URL'],
                         'http://auth:8080')
        self.assertEqual(self.app.config['AUTH_SERVER_TIMEOUT'], 1.5)

    def test_no_auth_data(self):
        """No authorization token is passed."""
        response = self.client.get('/auth/check')
        self.assertEqual(response.status_code, 401)
        self.assertEqual(json.loads(response.data), {
            'data': {'message': 'no auth method found', 'code': 301}
        })

    @mock.patch(f'{authentication.__name__}.requests.Session')
    def test_valid_token(self, mock_session):
        """The auth service accepts the token."""
        mock_session_instance = mock.MagicMock()
        mock_session_instance.post.return_value = mock.MagicMock(
            status_code=200,
            json=mock.MagicMock(return_value={'code': 0, 'message': 'ok'})
        )
        mock_session.return_value = mock_session_instance

        response = self.client.get('/auth/check',
                                   headers={'Authorization': 'Bearer abc123'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(json.loads(response.data),
                         {'data': {'message': 'ok', 'code': 0}})
        args, kwargs = mock_session_instance.post.call_args
        self.assertEqual(args[0], 'http://auth:8080/auth/auth_jwt')
        self.assertEqual(kwargs['timeout'], 1.5)

    def test_not_found(self):
        """Unknown paths get a JSON error."""
        response = self.client.get('/nope')
        self.assertEqual(response.status_code, 404)
        self.assertIn('reason', json.loads(response.data))

    def test_method_not_allowed(self):
        """Only GET is supported on the check endpoint."""
        response = self.client.post('/auth/check')
        self.assertEqual(response.status_code, 405)
        self.assertIn('reason', json.loads(response.data))

    def test_logging_is_configured(self):
        """The service installs exactly one log handler of its own."""
        create_app()
        handlers = [handler for handler in logging.getLogger().handlers
                    if getattr(handler, '_authgate', False)]
        self.assertEqual(len(handlers), 1)
