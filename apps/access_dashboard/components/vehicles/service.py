"""
Vehicles Service
Registry of authorized vehicles: validation, CRUD, search and CSV export
"""
import csv
import io
import logging
import re
import time
from datetime import datetime, timezone

from access_dashboard.core.errors import VehicleValidationError
from access_dashboard.core.json_store import JsonStore

logger = logging.getLogger(__name__)

PLATE_RE = re.compile(r'^[A-Z0-9-]{3,8}$')
VEHICLE_TYPES = ('carro', 'moto', 'bicicleta')
CSV_HEADER = ['id', 'name', 'plate', 'type', 'createdAt', 'facePhoto']


def validate_plate(plate):
    """Return the normalized plate or None if it is not a valid plate"""
    cleaned = (plate or '').strip().upper()
    return cleaned if PLATE_RE.match(cleaned) else None


def _now_iso():
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


class VehicleRegistryService:
    """Service for Vehicles component"""

    def __init__(self, path):
        self.store = JsonStore(path)

    def list_vehicles(self):
        return self.store.load()

    def get(self, vehicle_id):
        for vehicle in self.store.load():
            if vehicle['id'] == vehicle_id:
                return vehicle
        return None

    def search(self, query):
        """Filter by owner name, plate or type (case-insensitive)"""
        vehicles = self.store.load()
        q = (query or '').strip().lower()
        if not q:
            return vehicles
        return [
            v for v in vehicles
            if q in v['name'].lower() or q in v['plate'].lower() or q in v['type']
        ]

    def _validate(self, vehicles, name, plate, vehicle_type, exclude_id=None):
        name = (name or '').strip()
        if not name:
            raise VehicleValidationError('vehicles.name_required')
        normalized = validate_plate(plate)
        if not normalized:
            raise VehicleValidationError('vehicles.invalid_plate')
        if vehicle_type not in VEHICLE_TYPES:
            raise VehicleValidationError('vehicles.invalid_type')
        if any(v['plate'] == normalized and v['id'] != exclude_id for v in vehicles):
            raise VehicleValidationError('vehicles.duplicate_plate')
        return name, normalized

    def register(self, name, plate, vehicle_type='carro', face_photo=None):
        """Add a vehicle at the top of the registry"""
        def apply(vehicles):
            owner, normalized = self._validate(vehicles, name, plate, vehicle_type)
            vehicle_id = int(time.time() * 1000)
            existing_ids = {v['id'] for v in vehicles}
            while vehicle_id in existing_ids:
                vehicle_id += 1
            vehicle = {
                'id': vehicle_id,
                'name': owner,
                'plate': normalized,
                'type': vehicle_type,
                'createdAt': _now_iso(),
                'facePhoto': face_photo or None,
            }
            return [vehicle] + vehicles, vehicle

        vehicle = self.store.update(apply)
        logger.info('Vehicle %s registered for %s', vehicle['plate'], vehicle['name'])
        return vehicle

    def update(self, vehicle_id, name, plate, vehicle_type='carro', face_photo=None):
        """Edit a vehicle, keeping its creation date"""
        def apply(vehicles):
            index = next((i for i, v in enumerate(vehicles) if v['id'] == vehicle_id), None)
            if index is None:
                raise VehicleValidationError('vehicles.not_found')
            owner, normalized = self._validate(vehicles, name, plate, vehicle_type, exclude_id=vehicle_id)
            updated = dict(vehicles[index], name=owner, plate=normalized,
                           type=vehicle_type, facePhoto=face_photo or None)
            vehicles = list(vehicles)
            vehicles[index] = updated
            return vehicles, updated

        vehicle = self.store.update(apply)
        logger.info('Vehicle %s updated', vehicle['id'])
        return vehicle

    def delete(self, vehicle_id):
        def apply(vehicles):
            remaining = [v for v in vehicles if v['id'] != vehicle_id]
            if len(remaining) == len(vehicles):
                raise VehicleValidationError('vehicles.not_found')
            return remaining, True

        self.store.update(apply)
        logger.info('Vehicle %s deleted', vehicle_id)

    def clear(self):
        self.store.save([])
        logger.info('Vehicle registry cleared')

    def registered_on(self, day):
        """Vehicles whose creation date (local time) falls on ``day``"""
        count = 0
        for vehicle in self.store.load():
            try:
                created = datetime.fromisoformat(vehicle['createdAt'].replace('Z', '+00:00'))
            except (KeyError, ValueError):
                continue
            if created.tzinfo is not None:
                created = created.astimezone()
            if created.date() == day:
                count += 1
        return count

    def export_csv(self):
        """Serialize the registry as CSV"""
        vehicles = self.store.load()
        if not vehicles:
            raise VehicleValidationError('vehicles.no_vehicles_to_export')

        output = io.StringIO()
        writer = csv.writer(output, lineterminator='\n', quoting=csv.QUOTE_MINIMAL)
        writer.writerow(CSV_HEADER)
        for v in vehicles:
            writer.writerow([v['id'], v['name'], v['plate'], v['type'],
                             v['createdAt'], v.get('facePhoto') or ''])
        return output.getvalue().rstrip('\n')
