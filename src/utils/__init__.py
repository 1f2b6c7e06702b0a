"""
Utility modules.
"""

from .logging import setup_logging, log_config

__all__ = ['setup_logging', 'log_config']
