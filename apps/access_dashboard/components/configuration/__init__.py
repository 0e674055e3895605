"""
Configuration Component
"""
from .routes import configuration_bp
from .service import ConfigurationService


def init_configuration(app):
    """Initialize Configuration component with Flask app"""
    service = ConfigurationService(app.config['LANGUAGES'], app.config['DEFAULT_LANGUAGE'])
    app.extensions['configuration'] = service
    app.register_blueprint(configuration_bp)
    return service


__all__ = ['configuration_bp', 'ConfigurationService', 'init_configuration']
