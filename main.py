import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from scrimfinder.config import LOG_LEVEL
from scrimfinder.database import create_db_and_tables, dispose_engine
from scrimfinder.routers import auth, pages, reviews, scrims, teams

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s: %(name)s: %(message)s",
)
logger = logging.getLogger("scrimfinder")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: Create database tables
    create_db_and_tables()
    logger.info("Database ready")
    yield
    # Shutdown: release pooled connections
    dispose_engine()


# Initialize FastAPI app
app = FastAPI(
    title="Scrim Finder",
    description="Post, find and book practice matches between teams",
    version="1.0.0",
    lifespan=lifespan
)

# Include routers
app.include_router(auth.router)
app.include_router(teams.router)
app.include_router(scrims.router)
app.include_router(reviews.router)
app.include_router(pages.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
