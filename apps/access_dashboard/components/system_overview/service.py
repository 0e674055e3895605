"""
System Overview Service
"""
from access_dashboard.core import service_metrics, system_logs


class SystemOverviewService:
    """Service for System Overview component"""

    def __init__(self, monitor, vehicles=None):
        self.monitor = monitor
        self.vehicles = vehicles

    def get_system_metrics(self):
        """Get system performance metrics"""
        services = self.monitor.services
        metrics = [service_metrics[service_id] for service_id in services]

        total_requests = sum(m.get('requests', 0) for m in metrics)
        total_errors = sum(m.get('errors', 0) for m in metrics)
        healthy_services = sum(1 for m in metrics if m.get('status') == 'healthy')

        return {
            'total_requests': total_requests,
            'total_errors': total_errors,
            'error_rate': (total_errors / max(total_requests, 1)) * 100,
            'healthy_services': healthy_services,
            'total_services': len(services),
            'vehicles_count': len(self.vehicles.list_vehicles()) if self.vehicles else 0,
            'logs_count': len(system_logs),
        }

    def get_services_status(self, refresh=False):
        """Get all services status, optionally running a check first"""
        if refresh:
            return self.monitor.check_all_services()
        return self.monitor.get_services_status()
