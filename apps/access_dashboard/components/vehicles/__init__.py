"""
Vehicles Component
Vehicle registry with manual and camera-assisted entry
"""
import os

from .routes import vehicles_bp
from .service import VEHICLE_TYPES, VehicleRegistryService, validate_plate


def init_vehicles(app):
    """Initialize Vehicles component with Flask app"""
    service = VehicleRegistryService(os.path.join(app.config['DATA_DIR'], 'vehicles.json'))
    app.extensions['vehicles'] = service
    app.register_blueprint(vehicles_bp)
    return service


__all__ = ['vehicles_bp', 'VehicleRegistryService', 'validate_plate', 'VEHICLE_TYPES',
           'init_vehicles']
