"""
Dashboard configuration settings
"""
import os
from datetime import timedelta


class DashboardConfig:
    """Centralized configuration for dashboard"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')
    PERMANENT_SESSION_LIFETIME = timedelta(hours=8)
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # photos and camera frames

    HOST = os.environ.get('DASHBOARD_HOST', '0.0.0.0')
    PORT = int(os.environ.get('DASHBOARD_PORT', 8081))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "100 per minute"
    LOGIN_RATE_LIMIT = "10 per minute"

    # External services
    BACKEND_API_URL = os.environ.get('BACKEND_API_URL', 'https://backend-x2ed.onrender.com/api')
    MOVEMENTS_API_URL = os.environ.get('MOVEMENTS_API_URL',
                                       'https://6870b1767ca4d06b34b7971d.mockapi.io/movimientos')
    PLATE_API_URL = os.environ.get('PLATE_API_URL', 'https://api.platerecognizer.com/v1/plate-reader/')
    PLATE_API_KEY = os.environ.get('PLATE_API_KEY', '')
    PLATE_REGIONS = os.environ.get('PLATE_REGIONS', 'co')
    PLATE_MAX_WIDTH = 1280
    HTTP_TIMEOUT = 10

    # Local storage for the vehicle registry and managed users
    DATA_DIR = os.environ.get('DATA_DIR', os.path.join(os.getcwd(), 'data'))

    # Server-attached camera (gate camera)
    CAMERA_INDEX = int(os.environ.get('CAMERA_INDEX', 0))
    CAMERA_WIDTH = 1280
    CAMERA_HEIGHT = 720
    CAMERA_JPEG_QUALITY = 90

    # Backend role ids used at registration
    ROLE_IDS = {
        'admin': 1,
        'usuario': 2,
    }
    ADMIN_ROLES = ('admin',)

    LANGUAGES = ('es', 'en')
    DEFAULT_LANGUAGE = os.environ.get('DEFAULT_LANGUAGE', 'es')

    # Health monitoring of the external services
    MONITOR_INTERVAL = 15
    SERVICES = {
        'backend': {
            'name': 'Backend API',
            'description': 'Authentication and user profiles',
            'health_url': BACKEND_API_URL.rstrip('/') + '/ping',
        },
        'movements_api': {
            'name': 'Movements API',
            'description': 'Entry/exit log',
            'health_url': MOVEMENTS_API_URL,
        },
        'plate_recognizer': {
            'name': 'Plate Recognizer',
            'description': 'License plate recognition',
            'health_url': 'https://api.platerecognizer.com/v1/statistics/',
            'auth_header': 'Token',
        },
    }

    # Seed for the admin user list
    USERS_SEED = [
        {'id': 1, 'name': 'Juan Pérez', 'email': 'juan@example.com', 'role': 'usuario',
         'document': '12345678', 'status': 'active', 'registeredAt': '2025-08-19'},
        {'id': 2, 'name': 'María López', 'email': 'maria@example.com', 'role': 'usuario',
         'document': '87654321', 'status': 'active', 'registeredAt': '2025-08-19'},
        {'id': 3, 'name': 'Carlos Gómez', 'email': 'carlos@example.com', 'role': 'usuario',
         'document': '11223344', 'status': 'blocked', 'registeredAt': '2025-08-18'},
        {'id': 4, 'name': 'Ana Torres', 'email': 'ana@example.com', 'role': 'admin',
         'document': '55667788', 'status': 'active', 'registeredAt': '2025-08-17'},
    ]

    # Polling intervals (ms) used by the pages
    POLLING_INTERVALS = {
        'movements': 3000,
        'summary': 3000,
        'services': 5000,
        'logs': 10000,
        'clock': 1000,
    }

    # UI settings
    MAX_LOG_ENTRIES = 1000
    HOME_USER_RESULTS = 5
    MESSAGE_TIMEOUT_MS = 4000

    @classmethod
    def get_service_config(cls, service_name):
        """Get configuration for a specific service"""
        return cls.SERVICES.get(service_name, {})


class TestingConfig(DashboardConfig):
    """Configuration used by the test-suite"""

    TESTING = True
    SECRET_KEY = 'testing'
    RATELIMIT_ENABLED = False
    DATA_DIR = None  # set per test
    BACKEND_API_URL = 'http://backend.test/api'
    MOVEMENTS_API_URL = 'http://movements.test/movimientos'
    PLATE_API_URL = 'http://plates.test/v1/plate-reader/'
    PLATE_API_KEY = 'test-key'
