"""Main FastAPI application for the Sudoku generator."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.routes import _get_settings, router


@asynccontextmanager
async def _app_lifespan(_: FastAPI):
    """Load settings eagerly so misconfiguration fails at startup."""
    try:
        _get_settings()
    except ValueError as e:
        raise RuntimeError(f"Invalid generator settings at startup: {e}") from e
    yield


app = FastAPI(
    title="Sudoku Generator API",
    description="API for generating, restoring and solving Sudoku puzzles",
    version=__version__,
    lifespan=_app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sudoku Generator API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("sudokugen.main:app", host="0.0.0.0", port=8000, reload=True)
