"""FastAPI application exposing the scoring engine."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scoring.config import ScoringSettings, get_settings


def create_app(settings: Optional[ScoringSettings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Golf Match Scoring API",
        version="1.0.0",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import formats, scoring
    app.include_router(formats.router, prefix="/api/formats", tags=["formats"])
    app.include_router(scoring.router, prefix="/api/scoring", tags=["scoring"])

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "reference_par": settings.reference_par}

    return app


app = create_app()
