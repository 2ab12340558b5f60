"""
Shared utilities for CinePick.
"""

from cinepick.utils.logging_config import setup_logging, configure_script_logging

__all__ = ['setup_logging', 'configure_script_logging']
