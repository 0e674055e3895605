"""
Backend API client
Thin wrapper over the access-control backend: registration, two-factor
enrolment and verification, login, profile and ping.
"""
import logging

import requests

from .errors import BackendError, SessionExpiredError
from .redact import redact_for_log

logger = logging.getLogger(__name__)


def extract_error_message(response, fallback):
    """Return the ``message`` field of a JSON error body, else *fallback*"""
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get('message'):
        return str(body['message'])
    return fallback


class BackendClient:
    """HTTP client for the backend REST API"""

    def __init__(self, base_url, timeout=10, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method, path, operation, **kwargs):
        url = f'{self.base_url}{path}'
        logger.debug('%s %s payload=%s', method, url,
                     redact_for_log(kwargs.get('json') or kwargs.get('data')))
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning('%s failed: %s', operation, e)
            raise BackendError(str(e) or f'Network error while {operation}', endpoint=path) from e

        if not response.ok:
            message = extract_error_message(
                response, f'{operation.capitalize()} failed (status {response.status_code})')
            logger.info('%s rejected: HTTP %s %s', operation, response.status_code, message)
            error_class = SessionExpiredError if response.status_code == 401 else BackendError
            raise error_class(message, status_code=response.status_code, endpoint=path)

        try:
            return response.json()
        except ValueError as e:
            raise BackendError(f'Invalid JSON from backend while {operation}',
                               status_code=response.status_code, endpoint=path) from e

    def register_user(self, fields, photo=None):
        """Register a user. The response may carry a 2FA ``qrCodeDataUrl``."""
        files = None
        if photo is not None:
            filename, content, content_type = photo
            files = {'photo': (filename, content, content_type)}
        return self._request('POST', '/auth/register', 'registering user',
                             data=fields, files=files)

    def verify_2fa(self, email, code):
        """Confirm 2FA enrolment with the first code from the authenticator"""
        return self._request('POST', '/auth/verify-2fa', 'verifying 2FA code',
                             json={'email': email, 'twoFactorCode': code})

    def login_user(self, email, password):
        """Log in. Returns either a token or ``requires2FA``."""
        return self._request('POST', '/auth/login', 'logging in',
                             json={'email': email, 'password': password})

    def verify_login_2fa(self, email, code):
        """Complete a 2FA login and obtain the session token"""
        return self._request('POST', '/auth/verify-login-2fa', 'verifying 2FA login code',
                             json={'email': email, 'twoFactorCode': code})

    def get_user_profile(self, token):
        """Fetch the profile of the logged-in user"""
        if not token:
            raise SessionExpiredError('No authentication token available')
        return self._request('GET', '/auth/profile', 'fetching profile',
                             headers={'Authorization': f'Bearer {token}'})

    def ping(self):
        """Check the backend responds"""
        body = self._request('GET', '/ping', 'pinging backend')
        if isinstance(body, dict):
            return body
        return {'result': body}
