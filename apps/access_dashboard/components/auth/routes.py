"""
Auth Routes
Login, registration, two-factor handshakes, logout and profile
"""
import logging

from flask import (Blueprint, current_app, flash, redirect, render_template, request,
                   session, url_for)

from access_dashboard.core.auth import (current_user, is_authenticated, login_required,
                                        start_session)
from access_dashboard.core.errors import BackendError, SessionExpiredError, ValidationError
from access_dashboard.core.i18n import t
from access_dashboard.core.rate_limit import limiter, login_limit

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)

PENDING_LOGIN_KEY = 'pending_2fa_email'
PENDING_ENROLMENT_KEY = 'pending_enrolment'


def _service():
    return current_app.extensions['auth']


def _error_message(error):
    """Validation errors carry a translation key, backend errors a message"""
    if isinstance(error, ValidationError):
        return t(error.code)
    return str(error)


def _safe_next(target):
    if target and target.startswith('/') and not target.startswith('//'):
        return target
    return url_for('main.index')


@auth_bp.route('/login', methods=['GET', 'POST'])
@limiter.limit(login_limit, methods=['POST'])
def login():
    if request.method == 'GET':
        if is_authenticated():
            return redirect(url_for('main.index'))
        return render_template('login.html', next=request.args.get('next', ''))

    email = request.form.get('email', '')
    try:
        result = _service().login(email, request.form.get('password', ''))
    except (ValidationError, BackendError) as e:
        flash(_error_message(e), 'error')
        return render_template('login.html', email=email, next=request.form.get('next', '')), 401

    if result['requires_2fa']:
        session[PENDING_LOGIN_KEY] = result['email']
        session['pending_next'] = request.form.get('next', '')
        return redirect(url_for('auth.verify_login'))

    start_session(result['token'], result['user'])
    flash(t('login.success'), 'success')
    return redirect(_safe_next(request.form.get('next')))


@auth_bp.route('/login/verify', methods=['GET', 'POST'])
@limiter.limit(login_limit, methods=['POST'])
def verify_login():
    """Second step of a 2FA login"""
    email = session.get(PENDING_LOGIN_KEY)
    if not email:
        flash(t('two_factor.no_pending'), 'warning')
        return redirect(url_for('auth.login'))

    if request.method == 'GET':
        return render_template('two_factor.html', mode='login', email=email)

    try:
        result = _service().verify_login(email, request.form.get('code', ''))
    except (ValidationError, BackendError) as e:
        flash(_error_message(e), 'error')
        return render_template('two_factor.html', mode='login', email=email), 401

    next_url = session.get('pending_next')
    start_session(result['token'], result['user'])
    flash(t('login.success'), 'success')
    return redirect(_safe_next(next_url))


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    if request.method == 'GET':
        return render_template('register.html', form={})

    photo = None
    upload = request.files.get('photo')
    if upload is not None and upload.filename:
        photo = (upload.filename, upload.read(), upload.mimetype or 'application/octet-stream')

    try:
        result = _service().register(request.form, photo=photo)
    except (ValidationError, BackendError) as e:
        flash(_error_message(e), 'error')
        return render_template('register.html', form=request.form), 400

    if result['qr_code']:
        session[PENDING_ENROLMENT_KEY] = {'email': result['email'], 'qr_code': result['qr_code']}
        return redirect(url_for('auth.verify_enrolment'))

    flash(t('register.success'), 'success')
    return redirect(url_for('auth.login'))


@auth_bp.route('/register/verify', methods=['GET', 'POST'])
@limiter.limit(login_limit, methods=['POST'])
def verify_enrolment():
    """Show the enrolment QR code and confirm the first code"""
    pending = session.get(PENDING_ENROLMENT_KEY)
    if not pending:
        flash(t('two_factor.no_pending'), 'warning')
        return redirect(url_for('auth.register'))

    if request.method == 'GET':
        return render_template('two_factor.html', mode='enrolment', email=pending['email'],
                               qr_code=pending['qr_code'])

    try:
        _service().confirm_enrolment(pending['email'], request.form.get('code', ''))
    except (ValidationError, BackendError) as e:
        flash(_error_message(e), 'error')
        return render_template('two_factor.html', mode='enrolment', email=pending['email'],
                               qr_code=pending['qr_code']), 401

    session.pop(PENDING_ENROLMENT_KEY, None)
    flash(t('two_factor.enabled'), 'success')
    return redirect(url_for('auth.login'))


@auth_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    language = session.get('language')
    session.clear()
    if language:
        session['language'] = language
    flash(t('login.logged_out'), 'info')
    return redirect(url_for('auth.login'))


@auth_bp.route('/dashboard/profile')
@login_required
def profile():
    """Profile fetched fresh from the backend"""
    try:
        user = _service().profile(session['token'])
    except SessionExpiredError:
        session.clear()
        flash(t('common.session_expired'), 'warning')
        return redirect(url_for('auth.login'))
    except BackendError as e:
        logger.warning('Profile fetch failed: %s', e)
        flash(str(e), 'error')
        user = current_user()
    else:
        preferences = session.get('preferences') or {}
        session['user'] = dict(user, **{k: v for k, v in preferences.items() if v and k != 'role'})
        user = session['user']
    return render_template('profile.html', profile=user)
