"""
Configuration package for the hostel booking client.

Contains environment settings and logging configuration.
"""

from hostel_booking.config.settings import Settings, get_settings, settings
from hostel_booking.config.logging import setup_logging, get_logger

__all__ = ['Settings', 'get_settings', 'settings', 'setup_logging', 'get_logger']
