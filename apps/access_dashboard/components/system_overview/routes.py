"""
System Overview Routes
"""
from flask import Blueprint, current_app, jsonify, render_template, request

from access_dashboard.core.auth import admin_required

system_overview_bp = Blueprint('system_overview', __name__)


def _service():
    return current_app.extensions['system_overview']


@system_overview_bp.route('/dashboard/system')
@admin_required
def system_page():
    return render_template('system.html',
                           services=_service().get_services_status(),
                           metrics=_service().get_system_metrics())


@system_overview_bp.route('/api/system/metrics')
@admin_required
def api_system_metrics():
    """Get system performance metrics"""
    return jsonify(_service().get_system_metrics())


@system_overview_bp.route('/api/services/status')
@admin_required
def api_services_status():
    """Get all services status; ?refresh=1 checks them right away"""
    refresh = request.args.get('refresh', '').lower() in ('1', 'true', 'yes')
    return jsonify(_service().get_services_status(refresh=refresh))
