"""Configuration: constants and tracker settings"""

from .settings import TrackerConfig

__all__ = ['TrackerConfig']
