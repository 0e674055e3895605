"""
Vehicle access control dashboard
"""
from .dashboard_app import DashboardApp, create_app

__all__ = ['DashboardApp', 'create_app']
