"""
System Logs Service
Reads the in-memory log buffer filled by the logging handler
"""
from access_dashboard.core import system_logs


class SystemLogsService:
    """Service for System Logs component"""

    def __init__(self, buffer=None):
        self.buffer = system_logs if buffer is None else buffer

    def get_logs(self, level_filter='ALL', limit=50):
        """Most recent log entries, optionally filtered by level"""
        logs = list(self.buffer)

        level_filter = (level_filter or 'ALL').upper()
        if level_filter != 'ALL':
            logs = [log for log in logs if log.get('level') == level_filter]

        if limit and len(logs) > limit:
            logs = logs[-limit:]
        return logs
