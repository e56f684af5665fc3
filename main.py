"""
Bend Guide FastAPI Application

Main entry point for the travel guide, serving the map page, the published
seed document and the REST API used to browse and edit points of interest.

Author: Bend Guide maintainers
Date: 2026-10-17
"""

import logging
import os

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from logic import config
from logic.session import SessionGate
from logic.storage import LocalStorage
from logic.store import LocationStore
from server.admin import router as admin_router
from server.auth import router as auth_router
from server.locations import router as locations_router
from server.routes import router as routes_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Bend Guide")

# Include all routers
app.include_router(routes_router)
app.include_router(auth_router)
app.include_router(locations_router)
app.include_router(admin_router)

# ============================================================
# Application State
# ============================================================

storage = LocalStorage(config.STORAGE_PATH)
app.state.gate = SessionGate(config.ADMIN_PASSWORD, config.SESSION_SECRET_KEY, storage)
app.state.store = LocationStore(
    storage,
    config.SEED_PATH,
    export_dir=config.EXPORT_DIR,
    export_on_save=config.is_production(),
)
app.state.store.load(authenticated=app.state.gate.is_admin)
logger.info(
    "Loaded %d locations (%s mode)", len(app.state.store), config.BUILD_MODE
)

# ============================================================
# Static Files
# ============================================================

app.mount(
    "/static",
    StaticFiles(directory=os.path.join(config.BASE_DIR, "static")),
    name="static",
)
