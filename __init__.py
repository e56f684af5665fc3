"""
Bend Guide application.

A FastAPI-powered map guide for browsing points of interest, with an admin
mode for adding, editing and exporting locations.

Author: Bend Guide maintainers
Date: 2026-10-17
"""
