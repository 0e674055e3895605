"""
Users Component
"""
import os

from .routes import users_bp
from .service import UsersService


def init_users(app):
    """Initialize Users component with Flask app"""
    service = UsersService(os.path.join(app.config['DATA_DIR'], 'users.json'),
                           seed=app.config['USERS_SEED'])
    app.extensions['users'] = service
    app.register_blueprint(users_bp)
    return service


__all__ = ['users_bp', 'UsersService', 'init_users']
