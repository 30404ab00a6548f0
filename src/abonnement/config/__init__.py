"""
Configuration package.
"""

from abonnement.config.settings import Settings, load_config

__all__ = ["Settings", "load_config"]
