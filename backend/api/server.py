"""
api/server.py
-------------
FastAPI application entry point.

Run dev server:
    cd backend
    uvicorn api.server:app --reload --port 8000

Endpoints:
    GET  /health
    POST /recommendations
    POST /generate
    GET  /download-pdf
    POST /chat
    POST /map
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from api.routes import chat, documents, generate, health, map_view, recommendations
from modules.errors import ConfigurationError, SmartTourError

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Smart Tour Travel Recommendation API",
    version="1.0.0",
    description=(
        "Questionnaire-driven Indian travel recommendations. "
        "Integrates Gemini, OpenCage geocoding, and Leaflet maps via folium."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
)

# Allow the web frontend (any origin during development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SmartTourError)
async def smart_tour_error_handler(request: Request, exc: SmartTourError) -> JSONResponse:
    if isinstance(exc, ConfigurationError):
        logger.error("Configuration error on %s: %s", request.url.path, exc.cause or exc)
    elif exc.status_code >= 500:
        logger.error("Upstream failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


app.include_router(health.router,          tags=["Health"])
app.include_router(recommendations.router, tags=["Recommendations"])
app.include_router(generate.router,        tags=["Generate"])
app.include_router(documents.router,       tags=["Documents"])
app.include_router(chat.router,            tags=["Chat"])
app.include_router(map_view.router,        tags=["Map"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.server:app", host="0.0.0.0", port=8000, reload=True)
