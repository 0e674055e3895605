"""
Summary Service
Daily counters and weekly activity computed from the movement log
"""
from datetime import datetime, timedelta

from access_dashboard.components.movements.service import parse_timestamp
from access_dashboard.core.i18n import WEEKDAY_KEYS


def is_same_day(created_at, now):
    parsed = parse_timestamp(created_at)
    return parsed is not None and parsed.date() == now.date()


def count_today(movements, kind, now=None):
    now = now or datetime.now()
    return sum(1 for m in movements if m['kind'] == kind and is_same_day(m['created_at'], now))


def weekly_activity(movements, labels=None):
    """Seven buckets, Sunday first, counting every movement by weekday"""
    labels = labels or WEEKDAY_KEYS
    buckets = [{'name': labels[i], 'entries': 0, 'exits': 0} for i in range(7)]
    for movement in movements:
        parsed = parse_timestamp(movement['created_at'])
        if parsed is None:
            continue
        day = (parsed.weekday() + 1) % 7  # Monday=0 -> Sunday=0
        if movement['kind'] == 'entry':
            buckets[day]['entries'] += 1
        elif movement['kind'] == 'exit':
            buckets[day]['exits'] += 1
    return buckets


def week_range(now=None, date_format='%d/%m/%Y'):
    """Label for the last seven days, today included"""
    now = now or datetime.now()
    start = now - timedelta(days=6)
    return f'{start.strftime(date_format)} - {now.strftime(date_format)}'


class SummaryService:
    """Service for Summary component"""

    def __init__(self, movements_service):
        self.movements_service = movements_service

    def build_summary(self, labels=None, now=None, date_format='%d/%m/%Y'):
        now = now or datetime.now()
        movements = self.movements_service.list_movements()
        return {
            'entries_today': count_today(movements, 'entry', now),
            'exits_today': count_today(movements, 'exit', now),
            'total': len(movements),
            'weekly': weekly_activity(movements, labels),
            'week_range': week_range(now, date_format),
            'generated_at': now.isoformat(),
        }
