"""
FastAPI main application
CodeReg - Student and hackathon registration with random team generation

Modular architecture with separated API routers in codereg/api/:
- health.py: Health check and system status
- students.py: Student registration
- hackathons.py: Hackathon creation, enrollment and team generation
- view.py: Active view, UI snapshot and notification banner
- admin.py: In-memory state reset
- ui.py: Single-page UI serving

All routers access the shared controller via the codereg.state module.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
import logging
import os

from codereg import __version__, state
from codereg.config import resolve_settings

# Import all API routers
from codereg.api import health, admin, students, hackathons, view, ui


# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Settings shared by the static mount, the /app page and the controller
SETTINGS = resolve_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup: Build the controller from the loaded settings
    try:
        state.configure(SETTINGS)
        logger.info(f"✅ Server started with team size {SETTINGS.team_size}")
    except Exception as e:
        logger.error(f"❌ Failed to build controller: {e}")
        raise

    yield

    # Shutdown
    logger.info("🛑 Server shutting down")


# Create FastAPI app
app = FastAPI(
    title="CodeReg - Hackathon Registration",
    description="Register students, create hackathons and generate random teams of four",
    version=__version__,
    lifespan=lifespan
)

# CORS middleware (allow all origins for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== INCLUDE ROUTERS ====================

# Health check (GET /)
app.include_router(health.router)

# Students (GET/POST /api/students)
app.include_router(students.router)

# Hackathons (POST /api/hackathons, /api/hackathons/{id}/generate-teams, etc.)
app.include_router(hackathons.router)

# View state (GET /api/state, POST /api/view, POST /api/notification/clear)
app.include_router(view.router)

# Admin endpoints (POST /admin/reset)
app.include_router(admin.router)

# Page (GET /app)
app.include_router(ui.router)


# ==================== STATIC FILES ====================

# Mount static files directory for CSS/JS/images
if os.path.exists(SETTINGS.static_dir):
    app.mount("/static", StaticFiles(directory=SETTINGS.static_dir), name="static")


# ==================== RUN SERVER ====================

def run():
    import uvicorn
    uvicorn.run(app, host=SETTINGS.host, port=SETTINGS.port)


if __name__ == "__main__":
    run()
