"""
Vehicle Access Control Dashboard
Component-based Flask application
"""
import logging
import os

from flask import Flask

from access_dashboard.components.auth import init_auth
from access_dashboard.components.camera import init_camera
from access_dashboard.components.configuration import init_configuration
from access_dashboard.components.movements import init_movements
from access_dashboard.components.plate_recognition import init_plate_recognition
from access_dashboard.components.summary import init_summary
from access_dashboard.components.system_logs import init_system_logs
from access_dashboard.components.system_overview import init_system_overview
from access_dashboard.components.users import init_users
from access_dashboard.components.vehicles import init_vehicles
from access_dashboard.config.settings import DashboardConfig
from access_dashboard.core.log_buffer import configure_logging
from access_dashboard.core.rate_limit import init_rate_limiting
from access_dashboard.routes.main_routes import main_bp

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class DashboardApp:
    """Main dashboard application class"""

    def __init__(self):
        self.app = None
        self.monitor = None

    def create_app(self, config_object=DashboardConfig, overrides=None):
        """Create and configure Flask application"""
        self.app = Flask(__name__,
                         template_folder=os.path.join(BASE_DIR, 'templates'),
                         static_folder=os.path.join(BASE_DIR, 'static'))

        self.app.config.from_object(config_object)
        if overrides:
            self.app.config.update(overrides)

        configure_logging(self.app.config['LOG_LEVEL'])
        init_rate_limiting(self.app)

        # summary reads from movements, system overview counts vehicles
        init_auth(self.app)
        init_vehicles(self.app)
        init_plate_recognition(self.app)
        init_camera(self.app)
        init_movements(self.app)
        init_summary(self.app)
        init_users(self.app)
        init_configuration(self.app)
        init_system_logs(self.app)
        init_system_overview(self.app)

        self.app.register_blueprint(main_bp)

        self.monitor = self.app.extensions['monitor']
        return self.app

    def run(self):
        """Start the dashboard application"""
        if self.app is None:
            self.create_app()

        self.monitor.start()
        host, port = self.app.config['HOST'], self.app.config['PORT']
        logger.info('Access control dashboard started on http://%s:%s', host, port)
        if not self.app.config['PLATE_API_KEY']:
            logger.warning('PLATE_API_KEY is not set, plate recognition is disabled')

        try:
            self.app.run(host=host, port=port, debug=False)
        finally:
            self.monitor.stop()
            self.app.extensions['camera'].stop()


def create_app(config_object=DashboardConfig, overrides=None):
    """Application factory"""
    return DashboardApp().create_app(config_object, overrides)


def main():
    """Main entry point"""
    dashboard = DashboardApp()
    dashboard.create_app()
    dashboard.run()


if __name__ == '__main__':
    main()
