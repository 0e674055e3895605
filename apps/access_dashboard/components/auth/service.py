"""
Auth Service
Registration with optional 2FA enrolment, login with optional 2FA
verification, and profile lookup, all delegated to the backend
"""
import logging
import re

from access_dashboard.core.auth import normalize_user
from access_dashboard.core.backend_client import BackendClient
from access_dashboard.core.errors import BackendError, ValidationError

logger = logging.getLogger(__name__)

CODE_RE = re.compile(r'^\d{6}$')


def clean_code(code):
    """Strip spaces from a one-time code and check it has 6 digits"""
    cleaned = re.sub(r'\s+', '', code or '')
    if not CODE_RE.match(cleaned):
        raise ValidationError('two_factor.invalid_code_format')
    return cleaned


class AuthService:
    """Service for Auth component"""

    def __init__(self, base_url, role_ids, timeout=10, client=None):
        self.client = client or BackendClient(base_url, timeout=timeout)
        self.role_ids = role_ids

    def register(self, form, photo=None):
        """Validate the sign-up form and register the user

        Returns ``{'email', 'qr_code', 'message'}``; ``qr_code`` is set when
        the backend asks the user to enrol an authenticator.
        """
        name = (form.get('name') or '').strip()
        document = (form.get('document') or '').strip()
        email = (form.get('email') or '').strip().lower()
        password = form.get('password') or ''
        role = form.get('role') or ''

        if not name or not email or not password:
            raise ValidationError('register.missing_fields')
        if password != (form.get('confirm_password') or ''):
            raise ValidationError('register.password_mismatch')
        if role not in self.role_ids:
            raise ValidationError('register.invalid_role')

        fields = {
            'name': name,
            'document': document,
            'email': email,
            'password': password,
            'role': str(self.role_ids[role]),
        }
        response = self.client.register_user(fields, photo=photo)
        logger.info('User %s registered (2FA enrolment: %s)', email, bool(response.get('qrCodeDataUrl')))
        return {
            'email': email,
            'qr_code': response.get('qrCodeDataUrl'),
            'message': response.get('message', ''),
        }

    def confirm_enrolment(self, email, code):
        return self.client.verify_2fa(email, clean_code(code))

    def login(self, email, password):
        """Start a login

        Returns ``{'requires_2fa': True, 'email'}`` when a code is needed,
        else ``{'requires_2fa': False, 'token', 'user'}``.
        """
        email = (email or '').strip().lower()
        if not email or not password:
            raise ValidationError('login.missing_fields')

        response = self.client.login_user(email, password)
        if response.get('requires2FA'):
            logger.info('Login for %s requires 2FA', email)
            return {'requires_2fa': True, 'email': response.get('email') or email}

        if not response.get('token'):
            raise BackendError(response.get('message') or 'No token in login response')
        return {'requires_2fa': False, 'token': response['token'], 'user': response.get('user')}

    def verify_login(self, email, code):
        response = self.client.verify_login_2fa(email, clean_code(code))
        if not response.get('token'):
            raise BackendError(response.get('message') or 'No token in verification response')
        logger.info('2FA login verified for %s', email)
        return {'token': response['token'], 'user': response.get('user')}

    def profile(self, token):
        response = self.client.get_user_profile(token)
        return normalize_user(response.get('user'))
