"""
Camera and image helpers
Server-attached camera lifecycle (acquire, fallback, release) plus the
image conversions shared by plate recognition and face photos.
"""
import base64
import binascii
import logging
import re
import threading
import time

import cv2
import numpy as np

from .errors import CameraError

logger = logging.getLogger(__name__)

DATA_URL_RE = re.compile(r'^data:(?P<mime>image/[\w.+-]+);base64,(?P<data>.+)$', re.DOTALL)


def decode_data_url(data_url):
    """Split a ``data:image/...;base64,`` URL into (mime, bytes)"""
    match = DATA_URL_RE.match((data_url or '').strip())
    if not match:
        raise CameraError('Not an image data URL')
    try:
        return match.group('mime'), base64.b64decode(match.group('data'), validate=True)
    except (binascii.Error, ValueError) as e:
        raise CameraError(f'Invalid base64 image data: {e}') from e


def encode_data_url(jpeg_bytes, mime='image/jpeg'):
    """Build a data URL from encoded image bytes"""
    return f'data:{mime};base64,{base64.b64encode(jpeg_bytes).decode("ascii")}'


def normalize_jpeg(image_bytes, max_width=None, quality=90):
    """Decode any image OpenCV understands and re-encode it as JPEG

    Frames wider than ``max_width`` are downscaled keeping the aspect ratio.
    """
    buffer = np.frombuffer(image_bytes, dtype=np.uint8)
    frame = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
    if frame is None:
        raise CameraError('Could not decode image')

    height, width = frame.shape[:2]
    if max_width and width > max_width:
        scale = max_width / float(width)
        frame = cv2.resize(frame, (max_width, int(round(height * scale))),
                           interpolation=cv2.INTER_AREA)
    return encode_jpeg(frame, quality)


def encode_jpeg(frame, quality=90):
    ok, encoded = cv2.imencode('.jpg', frame, [int(cv2.IMWRITE_JPEG_QUALITY), int(quality)])
    if not ok:
        raise CameraError('Could not encode frame as JPEG')
    return encoded.tobytes()


class CameraStream:
    """A camera opened with preferred constraints, falling back to defaults"""

    def __init__(self, index=0, width=1280, height=720, capture_factory=None):
        self.index = index
        self.width = width
        self.height = height
        self.capture_factory = capture_factory or cv2.VideoCapture
        self.capture = None
        self.constraints = None
        self._lock = threading.Lock()

    @property
    def is_open(self):
        return self.capture is not None

    def open(self):
        """Acquire the device, trying preferred then default constraints"""
        with self._lock:
            if self.capture is not None:
                return self.constraints

            attempts = [
                ('preferred', {cv2.CAP_PROP_FRAME_WIDTH: self.width,
                               cv2.CAP_PROP_FRAME_HEIGHT: self.height}),
                ('default', {}),
            ]
            for name, props in attempts:
                capture = self.capture_factory(self.index)
                for prop, value in props.items():
                    capture.set(prop, value)
                if capture.isOpened():
                    ok, _ = capture.read()
                    if ok:
                        self.capture = capture
                        self.constraints = name
                        logger.info('Camera %s opened with %s constraints', self.index, name)
                        return name
                capture.release()
                logger.warning('Camera %s failed with %s constraints', self.index, name)

            raise CameraError(f'Could not open camera {self.index}')

    def read_frame(self):
        with self._lock:
            if self.capture is None:
                raise CameraError('Camera not started')
            ok, frame = self.capture.read()
        if not ok or frame is None:
            raise CameraError('Could not read frame from camera')
        return frame

    def read_jpeg(self, quality=90):
        """Capture one frame as JPEG bytes"""
        return encode_jpeg(self.read_frame(), quality)

    def frames(self, quality=80, interval=0.1):
        """Yield multipart MJPEG chunks while the camera stays open"""
        while self.is_open:
            try:
                jpeg = self.read_jpeg(quality)
            except CameraError:
                break
            yield (b'--frame\r\n'
                   b'Content-Type: image/jpeg\r\n\r\n' + jpeg + b'\r\n')
            time.sleep(interval)

    def release(self):
        """Release the device. Safe to call more than once."""
        with self._lock:
            if self.capture is not None:
                self.capture.release()
                logger.info('Camera %s released', self.index)
            self.capture = None
            self.constraints = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
