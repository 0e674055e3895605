"""
Users Routes
"""
from flask import (Blueprint, current_app, flash, jsonify, redirect, render_template,
                   request, url_for)

from access_dashboard.core.auth import admin_required
from access_dashboard.core.errors import StoreCorruptedError, UserValidationError
from access_dashboard.core.i18n import t

users_bp = Blueprint('users', __name__)


def _service():
    return current_app.extensions['users']


@users_bp.route('/dashboard/users')
@admin_required
def users_page():
    query = request.args.get('q', '')
    selected = None
    view_id = request.args.get('view', type=int)
    edit_id = request.args.get('edit', type=int)
    if view_id is not None or edit_id is not None:
        selected = _service().get(edit_id if edit_id is not None else view_id)
    return render_template('users.html', users=_service().search(query), query=query,
                           selected=selected, editing=edit_id is not None)


@users_bp.route('/dashboard/users/<int:user_id>/edit', methods=['POST'])
@admin_required
def update_user(user_id):
    try:
        _service().update(user_id, request.form)
    except UserValidationError as e:
        flash(t(e.code), 'error')
        return redirect(url_for('users.users_page', edit=user_id))
    except StoreCorruptedError:
        flash(t('common.store_corrupted'), 'error')
        return redirect(url_for('users.users_page'))
    flash(t('users.changes_saved'), 'success')
    return redirect(url_for('users.users_page', view=user_id))


@users_bp.route('/dashboard/users/<int:user_id>/delete', methods=['POST'])
@admin_required
def delete_user(user_id):
    try:
        _service().delete(user_id)
    except UserValidationError as e:
        flash(t(e.code), 'error')
    except StoreCorruptedError:
        flash(t('common.store_corrupted'), 'error')
    else:
        flash(t('users.user_deleted'), 'success')
    return redirect(url_for('users.users_page'))


@users_bp.route('/api/users')
@admin_required
def api_users():
    return jsonify(_service().search(request.args.get('q', '')))
