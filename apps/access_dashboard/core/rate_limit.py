"""
Rate limiting
Limits are read from the app config (RATELIMIT_*) when the app is created.
"""
from flask import current_app, jsonify
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .i18n import t

limiter = Limiter(key_func=get_remote_address)


def login_limit():
    return current_app.config['LOGIN_RATE_LIMIT']


def init_rate_limiting(app):
    """Attach the limiter and a 429 handler"""
    limiter.init_app(app)

    @app.errorhandler(429)
    def ratelimit_handler(e):
        return jsonify({'error': t('common.rate_limited'), 'limit': str(e.description)}), 429

    return limiter
