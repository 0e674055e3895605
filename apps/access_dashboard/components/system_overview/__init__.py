"""
System Overview Component
Health of the external services and high-level counters
"""
from access_dashboard.core.monitoring import ServiceMonitor

from .routes import system_overview_bp
from .service import SystemOverviewService


def init_system_overview(app):
    """Initialize system overview component with Flask app"""
    monitor = ServiceMonitor(app.config['SERVICES'],
                             interval=app.config['MONITOR_INTERVAL'],
                             plate_api_key=app.config['PLATE_API_KEY'])
    app.extensions['monitor'] = monitor
    service = SystemOverviewService(monitor, vehicles=app.extensions.get('vehicles'))
    app.extensions['system_overview'] = service
    app.register_blueprint(system_overview_bp)
    return service


__all__ = ['system_overview_bp', 'SystemOverviewService', 'init_system_overview']
