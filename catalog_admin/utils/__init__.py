"""
Utility modules for the catalog admin
"""
from .config_loader import AdminConfig, load_admin_config

__all__ = [
    'AdminConfig',
    'load_admin_config',
]
