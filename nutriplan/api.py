# -*- coding: utf-8 -*-
"""
Nutrition target & meal plan API

Daily energy/macro targets, per-user meal slots and AI meal plans with a
deterministic fallback.
"""

from __future__ import annotations

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .app_db import init_app_db
from .config import settings
from .meals.api import router as meals_router
from .nutrition.api import router as nutrition_router
from .plans.api import food_router
from .plans.api import router as plans_router
from .profile.api import router as profile_router

app = FastAPI(
    title="Nutriplan",
    description="Nutrition targets, meal slots and meal plan generation",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.app_db_path)

app.include_router(profile_router)
app.include_router(nutrition_router)
app.include_router(meals_router)
app.include_router(plans_router)
app.include_router(food_router)


@app.get("/api/health")
def health() -> dict:
    return {"ok": True}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    host = os.environ.get("NUTRIPLAN_HOST") or os.environ.get("HOST") or "127.0.0.1"
    port_raw = os.environ.get("NUTRIPLAN_PORT") or os.environ.get("PORT") or "8000"
    try:
        port = int(port_raw)
    except ValueError:
        port = 8000

    uvicorn.run("nutriplan.api:app", host=host, port=port, reload=False)
