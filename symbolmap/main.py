"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from symbolmap import __version__
from symbolmap.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.symbolmap_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="symbolmap",
        description="SVG sprite builder — standalone images in, one hidden <svg> of symbols out",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.symbolmap_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from symbolmap.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
