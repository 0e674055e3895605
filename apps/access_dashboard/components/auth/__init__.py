"""
Auth Component
Registration, login and two-factor authentication against the backend
"""
from .routes import auth_bp
from .service import AuthService, clean_code


def init_auth(app):
    """Initialize Auth component with Flask app"""
    service = AuthService(app.config['BACKEND_API_URL'], app.config['ROLE_IDS'],
                          timeout=app.config['HTTP_TIMEOUT'])
    app.extensions['auth'] = service
    app.register_blueprint(auth_bp)
    return service


__all__ = ['auth_bp', 'AuthService', 'clean_code', 'init_auth']
