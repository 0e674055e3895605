from datetime import datetime

from access_dashboard.components.movements.service import normalize_movement
from access_dashboard.components.summary.service import (SummaryService, count_today,
                                                         week_range, weekly_activity)
from access_dashboard.core.i18n import DATE_FORMATS, WEEKDAY_KEYS

from fakes import FakeResponse, FakeSession

NOW = datetime(2025, 8, 19, 12, 0)  # a Tuesday


def _movement(kind, created_at):
    tipo = 'Entrada' if kind == 'entry' else 'Salida'
    return normalize_movement({'tipo': tipo, 'placa': 'ABC123', 'createdAt': created_at})


MOVEMENTS = [
    _movement('entry', '2025-08-19T08:00:00'),
    _movement('entry', '2025-08-19T09:00:00'),
    _movement('exit', '2025-08-19T18:00:00'),
    _movement('entry', '2025-08-17T10:00:00'),  # Sunday
    _movement('exit', '2025-08-10T10:00:00'),   # Sunday a week earlier
    _movement('entry', 'not a date'),
]


def test_count_today():
    assert count_today(MOVEMENTS, 'entry', NOW) == 2
    assert count_today(MOVEMENTS, 'exit', NOW) == 1


def test_weekly_activity_has_seven_buckets_sunday_first():
    buckets = weekly_activity(MOVEMENTS, labels=['S', 'M', 'T', 'W', 'T', 'F', 'S'])

    assert len(buckets) == 7
    assert buckets[0] == {'name': 'S', 'entries': 1, 'exits': 1}
    assert buckets[2] == {'name': 'T', 'entries': 2, 'exits': 1}
    assert sum(b['entries'] + b['exits'] for b in buckets) == 5


def test_weekly_activity_empty():
    buckets = weekly_activity([])
    assert [b['name'] for b in buckets] == list(WEEKDAY_KEYS)
    assert all(b['entries'] == 0 and b['exits'] == 0 for b in buckets)


def test_week_range():
    assert week_range(NOW) == '13/08/2025 - 19/08/2025'
    assert week_range(NOW, DATE_FORMATS['en']) == '08/13/2025 - 08/19/2025'


def test_build_summary():
    class Movements:
        def list_movements(self):
            return MOVEMENTS

    summary = SummaryService(Movements()).build_summary(now=NOW)

    assert summary['entries_today'] == 2
    assert summary['exits_today'] == 1
    assert summary['total'] == 6
    assert summary['week_range'] == '13/08/2025 - 19/08/2025'
    assert len(summary['weekly']) == 7


def test_api_summary_uses_session_language(app, user_client):
    app.extensions['movements'].session = FakeSession([FakeResponse(200, [])])
    with user_client.session_transaction() as sess:
        sess['language'] = 'en'

    data = user_client.get('/api/summary').get_json()

    assert [b['name'] for b in data['weekly']][:2] == ['Sun', 'Mon']
    assert data['week_range'] == week_range(datetime.now(), '%m/%d/%Y')
    assert data['total'] == 0


def test_summary_page_survives_remote_error(app, user_client):
    app.extensions['movements'].session = FakeSession([FakeResponse(503, None, text='down')])
    response = user_client.get('/dashboard/summary')
    assert response.status_code == 200
