"""
External service monitoring
"""
import logging
import threading
from datetime import datetime

import requests

from . import service_metrics

logger = logging.getLogger(__name__)


class ServiceMonitor:
    """Polls the health URL of every configured external service"""

    def __init__(self, services, interval=15, plate_api_key='', session=None):
        self.services = services
        self.interval = interval
        self.plate_api_key = plate_api_key
        self.session = session or requests.Session()
        self.metrics = service_metrics
        self.thread = None
        self._stop = threading.Event()

    def start(self):
        """Start monitoring thread"""
        if self.thread is None or not self.thread.is_alive():
            self._stop.clear()
            self.thread = threading.Thread(target=self._monitor_loop, name='service-monitor', daemon=True)
            self.thread.start()
            logger.info('Service monitor started (interval %ss)', self.interval)

    def stop(self):
        """Stop monitoring thread"""
        self._stop.set()
        if self.thread:
            self.thread.join(timeout=2)

    def _monitor_loop(self):
        while not self._stop.is_set():
            try:
                self.check_all_services()
            except Exception:
                logger.exception('Monitor loop error')
            self._stop.wait(self.interval)

    def check_all_services(self):
        """Check status of all configured services"""
        for service_id in self.services:
            status = self.check_service_health(service_id)
            metrics = self.metrics[service_id]
            old_status = metrics['status']
            if status != old_status:
                logger.info('Service %s status changed: %s -> %s', service_id, old_status, status)

            metrics['requests'] += 1
            if status != 'healthy':
                metrics['errors'] += 1
                metrics['uptime'] = None
            elif metrics['uptime'] is None:
                metrics['uptime'] = datetime.now()
            metrics['status'] = status
            metrics['last_check'] = datetime.now()
        return self.get_services_status()

    def check_service_health(self, service_id):
        """Check health of a specific service"""
        config = self.services.get(service_id)
        if not config:
            return 'unknown'

        headers = {}
        if config.get('auth_header'):
            if not self.plate_api_key:
                return 'unconfigured'
            headers['Authorization'] = f"{config['auth_header']} {self.plate_api_key}"

        try:
            response = self.session.get(config['health_url'], headers=headers, timeout=3)
        except requests.RequestException as e:
            self.metrics[service_id]['error_log'].append({
                'timestamp': datetime.now().isoformat(),
                'error': str(e),
            })
            logger.debug('%s health check failed: %s', service_id, e)
            return 'down'

        if response.status_code == 200:
            return 'healthy'
        self.metrics[service_id]['error_log'].append({
            'timestamp': datetime.now().isoformat(),
            'error': f'HTTP {response.status_code}',
        })
        return 'unhealthy'

    def get_services_status(self):
        """Get current services status"""
        data = {}
        for service_id, config in self.services.items():
            metrics = self.metrics[service_id]
            uptime = metrics['uptime']
            data[service_id] = {
                'name': config['name'],
                'description': config.get('description', ''),
                'status': metrics['status'],
                'requests': metrics['requests'],
                'errors': metrics['errors'],
                'uptime_seconds': int((datetime.now() - uptime).total_seconds()) if uptime else 0,
                'last_check': metrics['last_check'].isoformat() if metrics['last_check'] else None,
                'last_error': metrics['error_log'][-1] if metrics['error_log'] else None,
            }
        return data
