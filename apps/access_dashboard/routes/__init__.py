"""
Page routes that do not belong to a component
"""
from .main_routes import main_bp

__all__ = ['main_bp']
