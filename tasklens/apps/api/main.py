"""FastAPI application entrypoint for Tasklens."""

from __future__ import annotations

import logging

from tasklens.libs.logging_utils import configure_logging

configure_logging()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette_exporter import PrometheusMiddleware, handle_metrics

from tasklens import __version__
from tasklens.apps.api.routes.tasks import router as tasks_router
from tasklens.libs.schemas import get_settings

LOGGER = logging.getLogger(__name__)
SETTINGS = get_settings()

app = FastAPI(title=f"{SETTINGS.app_name} API", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.cors_allow_origins,
    allow_credentials="*" not in SETTINGS.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
if SETTINGS.enable_metrics:
    app.add_middleware(PrometheusMiddleware, app_name=SETTINGS.app_name.lower())
    app.add_route("/metrics", handle_metrics)


@app.get("/")
@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(tasks_router, prefix=SETTINGS.api_prefix)

LOGGER.info(
    "Tasklens API ready",
    extra={"environment": SETTINGS.environment, "metrics": SETTINGS.enable_metrics},
)


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run("tasklens.apps.api.main:app", host="0.0.0.0", port=8000, reload=SETTINGS.is_development)
