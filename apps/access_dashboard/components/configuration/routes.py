"""
Configuration Routes
"""
from flask import (Blueprint, current_app, flash, redirect, render_template, request,
                   session, url_for)

from access_dashboard.core.auth import current_user, login_required
from access_dashboard.core.i18n import t

configuration_bp = Blueprint('configuration', __name__)


def _service():
    return current_app.extensions['configuration']


@configuration_bp.route('/dashboard/configuration')
@login_required
def configuration_page():
    profile = _service().profile_form(current_user(), session.get('preferences'))
    return render_template('configuration.html', profile=profile,
                           languages=_service().languages,
                           language=_service().clean_language(session.get('language')))


@configuration_bp.route('/dashboard/configuration', methods=['POST'])
@login_required
def save_configuration():
    preferences = _service().clean_preferences(request.form)
    session['preferences'] = preferences
    user = dict(current_user() or {})
    # the role used for authorization always comes from the backend
    user.update({k: v for k, v in preferences.items() if v and k != 'role'})
    session['user'] = user
    session['language'] = _service().clean_language(request.form.get('language'))
    flash(t('config.success'), 'success')
    return redirect(url_for('configuration.configuration_page'))


@configuration_bp.route('/language/<language>')
def set_language(language):
    """Switch the interface language and go back"""
    session['language'] = _service().clean_language(language)
    target = request.referrer or url_for('main.index')
    return redirect(target)
