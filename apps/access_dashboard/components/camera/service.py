"""
Camera Service
Owns the gate camera attached to the dashboard host
"""
import logging

from access_dashboard.core.camera import CameraStream, encode_data_url

logger = logging.getLogger(__name__)


class CameraService:
    """Service for Camera component"""

    def __init__(self, index=0, width=1280, height=720, jpeg_quality=90, stream=None):
        self.jpeg_quality = jpeg_quality
        self.stream = stream or CameraStream(index=index, width=width, height=height)

    def start(self):
        """Open the camera; returns the constraints that worked"""
        return self.stream.open()

    def stop(self):
        self.stream.release()

    def status(self):
        return {
            'active': self.stream.is_open,
            'index': self.stream.index,
            'constraints': self.stream.constraints,
        }

    def snapshot(self):
        """Capture one frame as JPEG bytes"""
        return self.stream.read_jpeg(self.jpeg_quality)

    def snapshot_data_url(self):
        """Capture one frame as a JPEG data URL (face photos)"""
        return encode_data_url(self.snapshot())

    def feed(self):
        return self.stream.frames()
