"""
Core services for dashboard components
"""
from collections import defaultdict, deque

from access_dashboard.config.settings import DashboardConfig

# Global state - shared across all components
system_logs = deque(maxlen=DashboardConfig.MAX_LOG_ENTRIES)
service_metrics = defaultdict(lambda: {
    'requests': 0,
    'errors': 0,
    'uptime': None,
    'status': 'unknown',
    'last_check': None,
    'error_log': deque(maxlen=50),
})

__all__ = [
    'system_logs',
    'service_metrics',
]
