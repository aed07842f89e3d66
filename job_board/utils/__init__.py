"""
Utility modules for the job board application.
"""

from .config import Config
from .log import setup_logging

__all__ = [
    "Config",
    "setup_logging",
]
