"""
Summary Component
"""
from .routes import summary_bp
from .service import SummaryService, count_today, week_range, weekly_activity


def init_summary(app):
    """Initialize Summary component; requires the Movements component"""
    service = SummaryService(app.extensions['movements'])
    app.extensions['summary'] = service
    app.register_blueprint(summary_bp)
    return service


__all__ = ['summary_bp', 'SummaryService', 'count_today', 'weekly_activity', 'week_range',
           'init_summary']
