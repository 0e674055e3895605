"""
In-memory log buffer
Every log record is mirrored into the shared ``system_logs`` deque so the
System Logs component can serve recent entries without touching log files.
"""
import logging
from datetime import datetime

from . import system_logs


class BufferedLogHandler(logging.Handler):
    """Logging handler that appends formatted records to a deque"""

    def __init__(self, buffer=None, level=logging.NOTSET):
        super().__init__(level)
        self.buffer = system_logs if buffer is None else buffer

    def emit(self, record):
        try:
            self.buffer.append({
                'timestamp': datetime.fromtimestamp(record.created).isoformat(),
                'level': record.levelname,
                'logger': record.name,
                'message': record.getMessage(),
            })
        except Exception:
            self.handleError(record)


def configure_logging(level='INFO'):
    """Configure root logging once and attach the buffer handler"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    root = logging.getLogger()
    root.setLevel(level)
    if not any(isinstance(h, BufferedLogHandler) for h in root.handlers):
        root.addHandler(BufferedLogHandler())
