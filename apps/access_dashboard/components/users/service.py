"""
Users Service
Administrator view of the managed user list
"""
import logging
from datetime import date

from access_dashboard.core.errors import UserValidationError
from access_dashboard.core.json_store import JsonStore

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('name', 'email', 'document', 'role', 'status')
REGULAR_ROLES = ('user', 'usuario')


class UsersService:
    """Service for Users component"""

    def __init__(self, path, seed=None):
        self.store = JsonStore(path, seed=seed)

    def list_users(self):
        return self.store.load()

    def get(self, user_id):
        return next((u for u in self.store.load() if u['id'] == user_id), None)

    def search(self, query):
        """Match name or email (case-insensitive) or document"""
        q = (query or '').strip()
        users = self.store.load()
        if not q:
            return users
        lowered = q.lower()
        return [
            u for u in users
            if lowered in u.get('name', '').lower()
            or lowered in (u.get('email') or '').lower()
            or q in (u.get('document') or '')
        ]

    def update(self, user_id, fields):
        changes = {k: (fields.get(k) or '').strip() for k in EDITABLE_FIELDS if k in fields}
        if not changes.get('name') or not changes.get('email'):
            raise UserValidationError('users.name_required')

        def apply(users):
            index = next((i for i, u in enumerate(users) if u['id'] == user_id), None)
            if index is None:
                raise UserValidationError('users.not_found')
            users = list(users)
            users[index] = dict(users[index], **changes)
            return users, users[index]

        user = self.store.update(apply)
        logger.info('User %s updated', user_id)
        return user

    def delete(self, user_id):
        def apply(users):
            remaining = [u for u in users if u['id'] != user_id]
            if len(remaining) == len(users):
                raise UserValidationError('users.not_found')
            return remaining, True

        self.store.update(apply)
        logger.info('User %s deleted', user_id)

    def home_stats(self, query='', limit=5, today=None):
        """KPIs and the short user list shown on the admin home"""
        today = (today or date.today()).isoformat()
        regular = [u for u in self.store.load() if (u.get('role') or '').lower() in REGULAR_ROLES]
        q = (query or '').strip().lower()
        matches = [u for u in regular if q in u.get('name', '').lower()]
        return {
            'total_users': len(regular),
            'active_users': sum(1 for u in regular if u.get('status') == 'active'),
            'users_today': sum(1 for u in regular if u.get('registeredAt') == today),
            'users': matches[:limit],
        }
