"""
System Logs Routes
"""
from flask import Blueprint, current_app, jsonify, request

from access_dashboard.core.auth import admin_required

system_logs_bp = Blueprint('system_logs', __name__)


@system_logs_bp.route('/api/logs')
@admin_required
def api_logs():
    """Get system logs with filtering"""
    level_filter = request.args.get('level', 'ALL')
    try:
        limit = int(request.args.get('limit', 50))
    except ValueError:
        limit = 50
    logs = current_app.extensions['system_logs'].get_logs(level_filter=level_filter, limit=max(limit, 0))
    return jsonify(logs)
