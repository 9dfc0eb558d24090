"""
Shared utilities package.

This package contains the logging configuration used by the API server
and the maintenance scripts.
"""

from moviedb.utils.logging_config import configure_api_logging, configure_script_logging

__all__ = ['configure_api_logging', 'configure_script_logging']
