"""
Server modules for the Bend Guide application.

This package contains FastAPI router modules for the page and seed routes,
the admin session, location management and collection import.

Author: Bend Guide maintainers
Date: 2026-10-17
"""
