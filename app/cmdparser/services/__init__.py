"""
Application services.
"""

from cmdparser.services.providers import get_settings

__all__ = ["get_settings"]
