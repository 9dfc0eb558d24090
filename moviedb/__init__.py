"""
Movies CRUD API Application Package.

This package contains the HTTP API, database models, migrations, seed data,
and shared utilities for the movies service.
"""

__version__ = "1.0.0"
