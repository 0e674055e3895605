"""
Movements Service
Entry/exit log stored in a remote REST collection
"""
import logging
from datetime import datetime, timezone

import requests

from access_dashboard.core.errors import MovementsError, ValidationError

logger = logging.getLogger(__name__)

# Wire values of the remote collection
KIND_TO_WIRE = {'entry': 'Entrada', 'exit': 'Salida'}
WIRE_TO_KIND = {v: k for k, v in KIND_TO_WIRE.items()}


def parse_timestamp(value):
    """Parse an ISO-8601 timestamp into a naive local datetime"""
    try:
        parsed = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def normalize_movement(raw):
    """Map a remote record onto internal keys"""
    return {
        'id': raw.get('id'),
        'kind': WIRE_TO_KIND.get(raw.get('tipo'), 'unknown'),
        'plate': raw.get('placa', ''),
        'time': raw.get('hora', ''),
        'created_at': raw.get('createdAt', ''),
    }


def sort_newest_first(movements):
    return sorted(
        movements,
        key=lambda m: parse_timestamp(m['created_at']) or datetime.min,
        reverse=True,
    )


class MovementsService:
    """Service for Movements component"""

    def __init__(self, api_url, timeout=10, session=None):
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def list_movements(self):
        """Get all movements, newest first"""
        try:
            response = self.session.get(self.api_url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning('Failed to fetch movements: %s', e)
            raise MovementsError(f'Could not load movements: {e}') from e

        if not isinstance(data, list):
            raise MovementsError('Unexpected movements payload')
        return sort_newest_first([normalize_movement(m) for m in data if isinstance(m, dict)])

    def register(self, kind, plate, now=None):
        """Record an entry or exit for ``plate``"""
        plate = (plate or '').strip()
        if not plate:
            raise ValidationError('movements.invalid_plate')
        if kind not in KIND_TO_WIRE:
            raise ValidationError('movements.invalid_kind')

        now = now or datetime.now(timezone.utc)
        local_now = now.astimezone() if now.tzinfo else now
        payload = {
            'tipo': KIND_TO_WIRE[kind],
            'placa': plate.upper(),
            'hora': local_now.strftime('%H:%M:%S'),
            'createdAt': now.isoformat().replace('+00:00', 'Z'),
        }

        try:
            response = self.session.post(self.api_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning('Failed to register movement: %s', e)
            raise MovementsError(f'Could not register movement: {e}') from e

        logger.info('%s registered for %s', payload['tipo'], payload['placa'])
        try:
            created = response.json()
        except ValueError:
            created = payload
        return normalize_movement(created if isinstance(created, dict) else payload)
