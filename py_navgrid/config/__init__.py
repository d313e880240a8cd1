"""
Configuration for navigation grid construction and search.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
