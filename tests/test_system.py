import logging
from collections import deque

import pytest
import requests

from access_dashboard.components.system_logs.service import SystemLogsService
from access_dashboard.config.settings import DashboardConfig
from access_dashboard.core import service_metrics
from access_dashboard.core.log_buffer import BufferedLogHandler
from access_dashboard.core.monitoring import ServiceMonitor

from fakes import FakeResponse, FakeSession

SERVICES = {
    'test_backend': {'name': 'Backend', 'health_url': 'http://backend.test/api/ping'},
    'test_movements': {'name': 'Movements', 'health_url': 'http://movements.test/movimientos'},
    'test_plates': {'name': 'Plates', 'health_url': 'http://plates.test/stats/', 'auth_header': 'Token'},
}


@pytest.fixture(autouse=True)
def clean_metrics():
    yield
    for service_id in SERVICES:
        service_metrics.pop(service_id, None)


def test_buffered_handler_records_entries():
    buffer = deque(maxlen=2)
    logger = logging.getLogger('access_dashboard.tests.buffer')
    handler = BufferedLogHandler(buffer)
    logger.addHandler(handler)
    try:
        logger.warning('first %s', 1)
        logger.warning('second')
        logger.error('third')
    finally:
        logger.removeHandler(handler)

    assert [entry['message'] for entry in buffer] == ['second', 'third']
    assert buffer[-1]['level'] == 'ERROR'
    assert buffer[-1]['logger'] == 'access_dashboard.tests.buffer'


def test_get_logs_filters_and_limits():
    buffer = deque([
        {'level': 'INFO', 'message': 'a'},
        {'level': 'ERROR', 'message': 'b'},
        {'level': 'INFO', 'message': 'c'},
        {'level': 'INFO', 'message': 'd'},
    ])
    service = SystemLogsService(buffer)

    assert [log['message'] for log in service.get_logs('info', limit=2)] == ['c', 'd']
    assert [log['message'] for log in service.get_logs('ERROR')] == ['b']
    assert len(service.get_logs('ALL', limit=0)) == 4


def test_monitor_records_health():
    session = FakeSession(routes={
        'http://backend.test/api/ping': FakeResponse(200, {'ok': True}),
        'http://movements.test/movimientos': requests.ConnectionError('refused'),
    })
    monitor = ServiceMonitor(SERVICES, plate_api_key='', session=session)

    status = monitor.check_all_services()

    assert status['test_backend']['status'] == 'healthy'
    assert status['test_movements']['status'] == 'down'
    assert status['test_plates']['status'] == 'unconfigured'
    assert status['test_movements']['errors'] == 1
    assert status['test_movements']['last_error']['error'] == 'refused'
    assert [c['url'] for c in session.calls] == ['http://backend.test/api/ping',
                                                 'http://movements.test/movimientos']


def test_monitor_sends_plate_api_token():
    session = FakeSession(routes={'http://plates.test/stats/': FakeResponse(401, {})})
    monitor = ServiceMonitor({'test_plates': SERVICES['test_plates']}, plate_api_key='k', session=session)

    assert monitor.check_service_health('test_plates') == 'unhealthy'
    assert monitor.get_services_status()['test_plates']['last_error']['error'] == 'HTTP 401'
    assert session.calls[0]['headers'] == {'Authorization': 'Token k'}


def test_monitor_unknown_service():
    assert ServiceMonitor(SERVICES, session=FakeSession()).check_service_health('nope') == 'unknown'


def test_monitor_logs_status_changes(caplog):
    session = FakeSession(routes={'http://backend.test/api/ping': FakeResponse(200, {})})
    monitor = ServiceMonitor({'test_backend': SERVICES['test_backend']}, session=session)

    with caplog.at_level(logging.INFO, logger='access_dashboard.core.monitoring'):
        monitor.check_all_services()
        monitor.check_all_services()

    changes = [r.getMessage() for r in caplog.records if 'status changed' in r.getMessage()]
    assert changes == ['Service test_backend status changed: unknown -> healthy']


# Routes

def test_api_logs(app, admin_client):
    logging.getLogger('access_dashboard.tests').error('plate reader offline')

    logs = admin_client.get('/api/logs?level=ERROR&limit=5').get_json()

    assert logs[-1]['message'] == 'plate reader offline'


def test_api_logs_admin_only(user_client):
    assert user_client.get('/api/logs').status_code == 403


def test_system_endpoints(app, admin_client):
    monitor = app.extensions['monitor']
    monitor.session = FakeSession(routes={
        service['health_url']: FakeResponse(200, {}) for service in monitor.services.values()
    })

    status = admin_client.get('/api/services/status?refresh=1').get_json()
    metrics = admin_client.get('/api/system/metrics').get_json()

    assert set(status) == set(app.config['SERVICES'])
    assert metrics['total_services'] == len(app.config['SERVICES'])
    assert metrics['vehicles_count'] == 0
    assert admin_client.get('/dashboard/system').status_code == 200
    for service_id in app.config['SERVICES']:
        service_metrics.pop(service_id, None)


def test_service_config_lookup():
    assert DashboardConfig.get_service_config('plate_recognizer')['auth_header'] == 'Token'
    assert DashboardConfig.get_service_config('nope') == {}
