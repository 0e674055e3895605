"""
Camera Component
Gate camera lifecycle, snapshots and MJPEG preview
"""
from .routes import camera_bp
from .service import CameraService


def init_camera(app):
    """Initialize Camera component with Flask app"""
    service = CameraService(
        index=app.config['CAMERA_INDEX'],
        width=app.config['CAMERA_WIDTH'],
        height=app.config['CAMERA_HEIGHT'],
        jpeg_quality=app.config['CAMERA_JPEG_QUALITY'],
    )
    app.extensions['camera'] = service
    app.register_blueprint(camera_bp)
    return service


__all__ = ['camera_bp', 'CameraService', 'init_camera']
