from contextlib import asynccontextmanager
from fastapi import FastAPI

from lookup import settings
from .db import engine, Base
from . import models  # noqa: F401  registers tables on Base.metadata
from .routers.quote import router as quote_router
from .routers.cep import router as cep_router
from .routers.read import router as read_router
from lookup.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging

# Create database tables if they don’t exist.
Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Expose the active budgets on app.state so /healthz can report them."""
    app.state.budgets = {
        "fetch_s": settings.FETCH_BUDGET_S,
        "persist_s": settings.PERSIST_BUDGET_S,
        "cep_s": settings.CEP_BUDGET_S,
    }
    yield


app = FastAPI(title="Deadline-bounded lookups", lifespan=lifespan)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Liveness check for monitoring.
    Returns:
      - ok: static True if the app is alive
      - budgets: deadlines (seconds) used by /cotacao and /cep
    """
    return {
        "ok": True,
        "service": "lookup",
        "version": 1,
        "budgets": getattr(app.state, "budgets", None),
    }

# Register API routers:
app.include_router(quote_router)
app.include_router(cep_router)
app.include_router(read_router)


def serve():
    """Console entry point: `lookup-server`."""
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
