"""
Camera API Routes
"""
from flask import Blueprint, Response, current_app, jsonify

from access_dashboard.components.plate_recognition import recognition_response
from access_dashboard.core.auth import login_required
from access_dashboard.core.errors import CameraError
from access_dashboard.core.i18n import t

camera_bp = Blueprint('camera', __name__, url_prefix='/api/camera')


def _service():
    return current_app.extensions['camera']


@camera_bp.route('/start', methods=['POST'])
@login_required
def api_start_camera():
    try:
        constraints = _service().start()
    except CameraError as e:
        return jsonify({'status': 'error', 'error': f"{t('vehicles.camera_error')}: {e}"}), 503
    return jsonify({'status': 'started', 'constraints': constraints,
                    'message': t('vehicles.camera_started')})


@camera_bp.route('/stop', methods=['POST'])
@login_required
def api_stop_camera():
    _service().stop()
    return jsonify({'status': 'stopped', 'message': t('vehicles.camera_stopped')})


@camera_bp.route('/status')
@login_required
def api_camera_status():
    return jsonify(_service().status())


@camera_bp.route('/snapshot', methods=['POST'])
@login_required
def api_camera_snapshot():
    """Capture a frame for a face photo"""
    try:
        data_url = _service().snapshot_data_url()
    except CameraError as e:
        return jsonify({'error': f"{t('vehicles.camera_not_started')}: {e}"}), 409
    return jsonify({'image': data_url, 'message': t('vehicles.photo_captured')})


@camera_bp.route('/recognize', methods=['POST'])
@login_required
def api_camera_recognize():
    """Capture a frame and send it to plate recognition"""
    try:
        image = _service().snapshot()
    except CameraError as e:
        return jsonify({'error': f"{t('vehicles.camera_not_started')}: {e}"}), 409
    return recognition_response(current_app.extensions['plate_recognition'], image=image)


@camera_bp.route('/feed')
@login_required
def camera_feed():
    """MJPEG preview of the gate camera"""
    if not _service().status()['active']:
        return jsonify({'error': t('vehicles.camera_not_started')}), 404
    return Response(_service().feed(), mimetype='multipart/x-mixed-replace; boundary=frame')
