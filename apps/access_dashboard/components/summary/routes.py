"""
Summary Routes
"""
from flask import Blueprint, current_app, jsonify, render_template

from access_dashboard.core.auth import current_user, login_required
from access_dashboard.core.errors import MovementsError
from access_dashboard.core.i18n import WEEKDAY_KEYS, date_format, t

summary_bp = Blueprint('summary', __name__)


def _service():
    return current_app.extensions['summary']


def _labels():
    return [t(key) for key in WEEKDAY_KEYS]


@summary_bp.route('/dashboard/summary')
@login_required
def summary_page():
    """Counters and weekly chart"""
    try:
        summary = _service().build_summary(_labels(), date_format=date_format())
        error = None
    except MovementsError as e:
        summary = None
        error = str(e)
    return render_template('summary.html', summary=summary, error=error, user=current_user(),
                           polling_interval=current_app.config['POLLING_INTERVALS']['summary'])


@summary_bp.route('/api/summary')
@login_required
def api_summary():
    try:
        return jsonify(_service().build_summary(_labels(), date_format=date_format()))
    except MovementsError as e:
        return jsonify({'error': str(e)}), 502
