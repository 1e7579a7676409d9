"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dota_drafter.config import settings
from dota_drafter.api.routes.dataset import router as dataset_router
from dota_drafter.api.routes.draft import router as draft_router
from dota_drafter.api.routes.heroes import router as heroes_router
from dota_drafter.services.dataset_service import DatasetStore
from dota_drafter.services.scoring_engine import ScoringEngine


def get_knowledge_dir() -> Path:
    """Resolve the knowledge directory from settings.

    Relative paths resolve from the repo root.
    """
    knowledge_dir = Path(settings.knowledge_dir)
    if knowledge_dir.is_absolute():
        return knowledge_dir
    repo_root = Path(__file__).parent.parent.parent.parent
    return repo_root / knowledge_dir


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: load the dataset once; tests may pre-populate app.state
    if not hasattr(app.state, "dataset_store"):
        store = DatasetStore(
            get_knowledge_dir(),
            dataset_url=settings.dataset_url or None,
            timeout=settings.dataset_timeout,
        )
        store.reload()
        app.state.dataset_store = store
    if not hasattr(app.state, "engine"):
        app.state.engine = ScoringEngine(min_pool_size=settings.min_pool_size)
    yield


app = FastAPI(
    title="Dota Drafter",
    description="Dota 2 draft assistant - synergy and counter scoring",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "dota-drafter"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Dota Drafter API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(heroes_router)
app.include_router(draft_router)
app.include_router(dataset_router)


def run():
    """Run the API server with uvicorn."""
    import uvicorn

    uvicorn.run("dota_drafter.main:app", host=settings.host, port=settings.port, reload=settings.debug)
