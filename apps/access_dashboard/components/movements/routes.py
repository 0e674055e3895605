"""
Movements Routes
"""
from flask import (Blueprint, current_app, flash, jsonify, redirect, render_template,
                   request, url_for)

from access_dashboard.core.auth import login_required
from access_dashboard.core.errors import MovementsError, ValidationError
from access_dashboard.core.i18n import t

movements_bp = Blueprint('movements', __name__)


def _service():
    return current_app.extensions['movements']


@movements_bp.route('/dashboard/movements')
@login_required
def movements_page():
    """Entry/exit log page"""
    movements = []
    try:
        movements = _service().list_movements()
    except MovementsError as e:
        flash(str(e), 'error')
    return render_template('movements.html', movements=movements,
                           polling_interval=current_app.config['POLLING_INTERVALS']['movements'])


@movements_bp.route('/dashboard/movements', methods=['POST'])
@login_required
def register_movement():
    try:
        _service().register(request.form.get('kind', ''), request.form.get('plate', ''))
    except ValidationError as e:
        flash(t(e.code), 'error')
    except MovementsError as e:
        flash(str(e), 'error')
    else:
        flash(t('movements.registered'), 'success')
    return redirect(url_for('movements.movements_page'))


@movements_bp.route('/api/movements')
@login_required
def api_movements():
    """Get movements, newest first"""
    try:
        return jsonify(_service().list_movements())
    except MovementsError as e:
        return jsonify({'error': str(e)}), 502


@movements_bp.route('/api/movements', methods=['POST'])
@login_required
def api_register_movement():
    """Register an entry or exit: {"kind": "entry"|"exit", "plate": "..."}"""
    payload = request.get_json(silent=True) or {}
    try:
        movement = _service().register(payload.get('kind', ''), payload.get('plate', ''))
    except ValidationError as e:
        return jsonify({'error': t(e.code)}), 400
    except MovementsError as e:
        return jsonify({'error': str(e)}), 502
    return jsonify(movement), 201
