"""
Publish API Lambda entry point.

Local dev:
    PYTHONPATH=src CONTENT_ROOT=. uv run uvicorn admin.handler:app --reload --port 8001

Lambda handler:
    admin.handler.handler
"""

import logging

from fastapi import FastAPI
from mangum import Mangum

from admin.routes import publish
from shared.config import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

app = FastAPI(
    title="Post Publisher API",
    description="Uploads changed blog posts to the posts blob container. All routes require a publish key.",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(publish.router)


@app.get("/health", include_in_schema=False)
def health():
    return {"status": "ok"}


# Mangum adapts the FastAPI ASGI app for AWS Lambda + API Gateway (HTTP API).
handler = Mangum(app, lifespan="off")
