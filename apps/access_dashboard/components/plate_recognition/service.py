"""
Plate Recognition Service
Sends a captured frame to the Plate Recognizer API and returns the best read
"""
import logging

import requests

from access_dashboard.core.camera import decode_data_url, normalize_jpeg
from access_dashboard.core.errors import CameraError, PlateRecognitionError

logger = logging.getLogger(__name__)


class PlateRecognitionService:
    """Service for Plate Recognition component"""

    def __init__(self, api_url, api_key, regions='co', max_width=1280, timeout=15, session=None):
        self.api_url = api_url
        self.api_key = api_key
        self.regions = regions
        self.max_width = max_width
        self.timeout = timeout
        self.session = session or requests.Session()

    def recognize_data_url(self, data_url):
        """Recognize a plate in a ``data:image/...;base64,`` frame"""
        try:
            _, image_bytes = decode_data_url(data_url)
        except CameraError as e:
            raise PlateRecognitionError(str(e)) from e
        return self.recognize(image_bytes)

    def recognize(self, image_bytes):
        """Recognize a plate in encoded image bytes

        Returns ``{'plate': ..., 'confidence': ...}`` or None when the API
        found no plate.
        """
        if not self.api_key:
            raise PlateRecognitionError('missing_api_key')

        try:
            jpeg = normalize_jpeg(image_bytes, max_width=self.max_width, quality=90)
        except CameraError as e:
            raise PlateRecognitionError(str(e)) from e

        try:
            response = self.session.post(
                self.api_url,
                headers={'Authorization': f'Token {self.api_key}'},
                files={'upload': ('plate.jpg', jpeg, 'image/jpeg')},
                data={'regions': self.regions},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning('Plate recognition request failed: %s', e)
            raise PlateRecognitionError(str(e)) from e

        if not response.ok:
            raise PlateRecognitionError(f'API error: {response.status_code} {response.text}')

        try:
            data = response.json()
        except ValueError as e:
            raise PlateRecognitionError('API returned invalid JSON') from e

        return self.parse_result(data)

    @staticmethod
    def parse_result(data):
        """Pick the first result of a Plate Recognizer response"""
        results = (data or {}).get('results') or []
        if not results:
            return None

        first = results[0]
        plate = str(first.get('plate') or '').upper()
        if not plate:
            return None

        confidence = first.get('score')
        if confidence is None:
            confidence = first.get('confidence')
        logger.info('Plate detected: %s (confidence %s)', plate, confidence)
        return {'plate': plate, 'confidence': confidence}
