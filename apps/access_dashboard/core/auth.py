"""
Session helpers and route guards
"""
from functools import wraps

from flask import current_app, flash, jsonify, redirect, request, session, url_for

from .i18n import t


def normalize_user(raw):
    """Map the backend user payload onto the keys the templates use"""
    raw = raw or {}
    role = raw.get('rol') or {}
    if isinstance(role, dict):
        role = role.get('nomRol', '')
    return {
        'name': raw.get('nomUsuario', ''),
        'document': raw.get('docUsuario', ''),
        'email': raw.get('emaUsuario', ''),
        'photo_url': raw.get('photoUrl'),
        'role': role or '',
        'two_factor_enabled': bool(raw.get('habilitado2FA', False)),
    }


def start_session(token, user):
    """Store the token and user after a completed login"""
    language = session.get('language')
    session.clear()
    if language:
        session['language'] = language
    session.permanent = True
    session['token'] = token
    session['user'] = normalize_user(user)


def current_user():
    return session.get('user')


def is_authenticated():
    return bool(session.get('token'))


def is_admin(user=None):
    user = user if user is not None else current_user()
    if not user:
        return False
    admin_roles = [r.lower() for r in current_app.config['ADMIN_ROLES']]
    return (user.get('role') or '').lower() in admin_roles


def _wants_json():
    return request.path.startswith('/api/')


def login_required(view):
    """Redirect anonymous users to the login page (401 for API routes)"""
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not is_authenticated():
            if _wants_json():
                return jsonify({'error': t('common.login_required')}), 401
            flash(t('common.login_required'), 'warning')
            return redirect(url_for('auth.login', next=request.path))
        return view(*args, **kwargs)
    return wrapped


def admin_required(view):
    """Only administrators get through; others see the unauthorized page"""
    @wraps(view)
    @login_required
    def wrapped(*args, **kwargs):
        if not is_admin():
            if _wants_json():
                return jsonify({'error': t('common.unauthorized')}), 403
            return redirect(url_for('main.unauthorized'))
        return view(*args, **kwargs)
    return wrapped
