"""Exception hierarchy for the access dashboard."""


class DashboardError(Exception):
    """Base exception for all dashboard errors."""


class BackendError(DashboardError):
    """Backend API call failed (network, non-2xx, invalid JSON)."""

    def __init__(self, message, status_code=None, endpoint=''):
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class SessionExpiredError(BackendError):
    """Session token missing or rejected by the backend."""


class MovementsError(DashboardError):
    """Movements API call failed."""


class PlateRecognitionError(DashboardError):
    """Plate recognition request failed or could not be made."""


class CameraError(DashboardError):
    """Camera could not be opened or read."""


class ValidationError(DashboardError):
    """Input rejected. ``code`` is a translation key."""

    def __init__(self, code, message=None):
        self.code = code
        super().__init__(message or code)


class VehicleValidationError(ValidationError):
    """Vehicle form rejected."""


class UserValidationError(ValidationError):
    """Managed user form rejected."""


class StoreCorruptedError(DashboardError):
    """A data file exists but cannot be parsed; writes are refused until it is fixed."""

    def __init__(self, path, reason=''):
        self.path = path
        super().__init__(f'Unreadable data file {path}: {reason}')
