"""
Plate Recognition Component
License plate reading through the Plate Recognizer API
"""
from .routes import plate_recognition_bp, recognition_response
from .service import PlateRecognitionService


def init_plate_recognition(app):
    """Initialize Plate Recognition component with Flask app"""
    service = PlateRecognitionService(
        api_url=app.config['PLATE_API_URL'],
        api_key=app.config['PLATE_API_KEY'],
        regions=app.config['PLATE_REGIONS'],
        max_width=app.config['PLATE_MAX_WIDTH'],
        timeout=app.config['HTTP_TIMEOUT'],
    )
    app.extensions['plate_recognition'] = service
    app.register_blueprint(plate_recognition_bp)
    return service


__all__ = ['plate_recognition_bp', 'PlateRecognitionService', 'init_plate_recognition',
           'recognition_response']
