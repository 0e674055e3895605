"""
Movements Component
Entry/exit log backed by the movements REST API
"""
from .routes import movements_bp
from .service import MovementsService, normalize_movement, parse_timestamp


def init_movements(app):
    """Initialize Movements component with Flask app"""
    service = MovementsService(app.config['MOVEMENTS_API_URL'], timeout=app.config['HTTP_TIMEOUT'])
    app.extensions['movements'] = service
    app.register_blueprint(movements_bp)
    return service


__all__ = ['movements_bp', 'MovementsService', 'normalize_movement', 'parse_timestamp',
           'init_movements']
