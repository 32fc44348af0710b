import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.settings import get_settings
from .routers import auth, projects, board, dashboard, admin

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Out-of-Band Project Tracker API",
    description="Backend API for tracking business projects on a dashboard and kanban board",
    version="1.0.0",
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router)
app.include_router(projects.router)
app.include_router(board.router)
app.include_router(dashboard.router)
app.include_router(admin.router)

# Make sure the default business exists at startup
from .db import get_db
from .services.bootstrap_service import BootstrapService

@app.on_event("startup")
def initialize_database():
    # a short-lived session; failure is logged and the app still starts
    db_gen = get_db()
    db = next(db_gen)
    try:
        BootstrapService.initialize_database(db, settings)
    finally:
        db_gen.close()

@app.get("/health")
async def health_check():
    return {"status": "healthy", "message": "Project Tracker API is running"}

@app.get("/")
async def root():
    return {"message": "Welcome to the Out-of-Band Project Tracker API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("tracker.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
