"""
Core logic for the Bend Guide application.

Location records, filtering, the location store and its persistent storage,
and the admin session gate. Nothing in this package depends on the web layer.

Author: Bend Guide maintainers
Date: 2026-10-17
"""
