# Configuration package
"""
Configuration package for the checkout API
Exports settings from settings.py for easy import
"""
from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
