"""
FastAPI Backend dla Spire of the Path.

Endpoints:
    POST   /api/games                      - nowa gra
    GET    /api/games/{id}                 - snapshot planszy
    DELETE /api/games/{id}                 - usunięcie sesji
    POST   /api/games/{id}/move            - krok gracza
    POST   /api/games/{id}/teleport        - teleport
    POST   /api/games/{id}/barrier         - linia barier
    POST   /api/games/{id}/mode            - tryb kliknięcia
    POST   /api/games/{id}/select          - kliknięcie w pole
    POST   /api/games/{id}/next-level      - kolejny poziom
    GET    /api/games/{id}/events          - log zdarzeń
    GET    /api/board-config               - konfiguracja planszy
    GET    /api/health                     - health check

Uruchomienie:
    uvicorn api.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from spire import __version__
from api.routers import games


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown events."""
    print("🚀 Spire of the Path API starting...")
    print("🌐 Open http://localhost:8000/docs in your browser")
    yield
    print("👋 Spire of the Path API shutting down...")


app = FastAPI(
    title="Spire of the Path API",
    description="Hex puzzle engine: board snapshots and player actions",
    version=__version__,
    lifespan=lifespan,
)

# CORS - UI może być serwowane z innego hosta
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(games.router, prefix="/api", tags=["Games"])


@app.get("/api/health")
async def health():
    """API health check."""
    return {"status": "healthy"}
