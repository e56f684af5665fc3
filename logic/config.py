"""
Configuration module.

This module holds the application settings: filesystem locations for the
seed resource and the persistent store, the admin password, the build mode,
and the map presentation defaults served to the browser.

Author: Bend Guide maintainers
Date: 2026-10-17
"""

import os
import secrets
import logging
from typing import Dict, Any, List

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DATA_DIR = os.getenv("GUIDE_DATA_DIR", os.path.join(BASE_DIR, "data"))
SEED_PATH = os.getenv("GUIDE_SEED_PATH", os.path.join(BASE_DIR, "static", "locations.json"))
STORAGE_PATH = os.path.join(DATA_DIR, "storage.json")
EXPORT_DIR = os.getenv("GUIDE_EXPORT_DIR", os.path.join(DATA_DIR, "exports"))
EXPORT_FILENAME = "locations.json"

# Storage keys, mirroring the browser's localStorage layout
LOCATIONS_KEY = "locations"
SESSION_KEY = "isAdmin"

# This would be replaced with a real auth boundary in production
ADMIN_PASSWORD = os.getenv("GUIDE_ADMIN_PASSWORD", "strongjasper")

SESSION_SECRET_KEY = os.getenv("SESSION_SECRET_KEY")
if not SESSION_SECRET_KEY:
    SESSION_SECRET_KEY = secrets.token_urlsafe(32)
    logger.warning(
        "SESSION_SECRET_KEY not set. Using temporary key. Set this in .env for production."
    )

SESSION_MAX_AGE = 60 * 60 * 24 * 7  # 7 days in seconds
COOKIE_NAME = "session"

BUILD_MODE = os.getenv("GUIDE_ENV", "development")

CATEGORIES: List[str] = ["Food", "Beverages", "Activities", "Home"]
DEFAULT_CATEGORY = "Food"
DEFAULT_EMOJI = "📍"

# Suggestions only; any glyph is accepted
CATEGORY_EMOJIS: Dict[str, List[str]] = {
    "Food": ["🍽️", "🍕", "🍜", "🍣", "🥗", "🍳", "🥪", "☕", "🍰", "🍦"],
    "Beverages": ["🍺", "🍷", "🍸", "🍹", "🥂", "🍻", "🥃"],
    "Activities": ["🏃", "🚴", "⛷️", "🏂", "🎣", "⛰️", "🏕️", "🎯", "🎨", "🎭", "🎪", "🎢", "🏖️", "🏊"],
    "Home": ["🏠", "🏡", "🏘️", "🏚️", "🏛️", "🏰"],
}

INITIAL_CENTER = [44.0582, -121.3153]  # Bend, OR
INITIAL_ZOOM = 13

_CARTO_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
    'contributors &copy; <a href="https://carto.com/attributions">CARTO</a>'
)

MAP_STYLES: Dict[str, Dict[str, str]] = {
    "minimal": {
        "url": "https://{s}.basemaps.cartocdn.com/light_nolabels/{z}/{x}/{y}.png",
        "attribution": _CARTO_ATTRIBUTION,
    },
    "light": {
        "url": "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}.png",
        "attribution": _CARTO_ATTRIBUTION,
    },
    "detailed": {
        "url": "https://{s}.basemaps.cartocdn.com/rastertiles/voyager/{z}/{x}/{y}.png",
        "attribution": _CARTO_ATTRIBUTION,
    },
}
DEFAULT_MAP_STYLE = "detailed"


def is_production() -> bool:
    """Whether the build mode enables export-on-save."""
    return BUILD_MODE.lower() == "production"


def get_map_config() -> Dict[str, Any]:
    """Get the map presentation settings for the browser.

    Returns:
        Dictionary with centre, zoom, tile styles, categories and emoji
        suggestions.
    """
    return {
        "center": INITIAL_CENTER,
        "zoom": INITIAL_ZOOM,
        "styles": MAP_STYLES,
        "default_style": DEFAULT_MAP_STYLE,
        "categories": CATEGORIES,
        "category_emojis": CATEGORY_EMOJIS,
        "default_emoji": DEFAULT_EMOJI,
    }
