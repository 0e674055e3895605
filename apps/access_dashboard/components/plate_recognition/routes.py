"""
Plate Recognition API Routes
"""
from flask import Blueprint, current_app, jsonify, request

from access_dashboard.core.auth import login_required
from access_dashboard.core.errors import PlateRecognitionError
from access_dashboard.core.i18n import t

plate_recognition_bp = Blueprint('plate_recognition', __name__)


def _service():
    return current_app.extensions['plate_recognition']


def recognition_response(service, image=None, data_url=None):
    """Run recognition and build the JSON answer shared with the camera"""
    try:
        if data_url is not None:
            result = service.recognize_data_url(data_url)
        else:
            result = service.recognize(image)
    except PlateRecognitionError as e:
        message = str(e)
        if message == 'missing_api_key':
            return jsonify({'error': t('vehicles.missing_api_key')}), 503
        return jsonify({'error': f"{t('vehicles.recognition_error')}: {message}"}), 502

    if result is None:
        return jsonify({'plate': None, 'confidence': None,
                        'message': t('vehicles.no_plate_detected')})

    confidence = result['confidence']
    return jsonify({
        'plate': result['plate'],
        'confidence': confidence,
        'confidence_percent': round(confidence * 100, 1) if confidence is not None else None,
        'message': f"{t('vehicles.plate_detected')}: {result['plate']}",
    })


@plate_recognition_bp.route('/api/plates/recognize', methods=['POST'])
@login_required
def api_recognize_plate():
    """Recognize a plate from an uploaded file or a camera data URL"""
    upload = request.files.get('upload')
    if upload is not None:
        return recognition_response(_service(), image=upload.read())

    payload = request.get_json(silent=True) or {}
    data_url = payload.get('image') or request.form.get('image')
    if not data_url:
        return jsonify({'error': t('vehicles.capture_error')}), 400
    return recognition_response(_service(), data_url=data_url)
