"""
Main page routes for dashboard
"""
from datetime import date, datetime

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from access_dashboard.core.auth import admin_required, current_user, is_admin, is_authenticated
from access_dashboard.core.i18n import current_language, t

main_bp = Blueprint('main', __name__)


@main_bp.app_context_processor
def inject_globals():
    """Helpers every template can use"""
    return {
        't': t,
        'current_user': current_user(),
        'is_admin': is_admin(),
        'language': current_language(),
        'languages': current_app.config['LANGUAGES'],
        'polling_intervals': current_app.config['POLLING_INTERVALS'],
        'message_timeout': current_app.config['MESSAGE_TIMEOUT_MS'],
    }


@main_bp.route('/')
def index():
    """Send visitors to the page that fits their session"""
    if not is_authenticated():
        return redirect(url_for('auth.login'))
    if is_admin():
        return redirect(url_for('main.dashboard'))
    return redirect(url_for('vehicles.vehicles_page'))


@main_bp.route('/dashboard')
@admin_required
def dashboard():
    """Admin home: KPIs, user search and quick access cards"""
    query = request.args.get('q', '')
    stats = current_app.extensions['users'].home_stats(
        query, limit=current_app.config['HOME_USER_RESULTS'])
    cars_today = current_app.extensions['vehicles'].registered_on(date.today())
    return render_template('dashboard_home.html',
                           stats=stats,
                           cars_today=cars_today,
                           query=query,
                           current_time=datetime.now())


@main_bp.route('/unauthorized')
def unauthorized():
    return render_template('unauthorized.html'), 403
