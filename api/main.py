from __future__ import annotations

from dataclasses import asdict
import logging
import math

import numpy as np
import pandas as pd
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.responses import Response
from fastapi.encoders import jsonable_encoder

from api.schemas import ArtistApplication, CatalogCriteriaModel, StatusUpdateModel
from artistly.actions import ActionHooks
from artistly.data import export_frame, load_catalog_data
from artistly.filters import normalize_criteria
from artistly.metrics_catalog import compute_catalog
from artistly.metrics_dashboard import compute_dashboard
from artistly.metrics_home import compute_home
from artistly.onboarding import submit_application
from artistly.settings import configure_logging, get_settings


configure_logging()
app = FastAPI(title="Artistly API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _hooks() -> ActionHooks:
    data_ctx = load_catalog_data()
    return ActionHooks(data_ctx["artists"], data_ctx["bookings"])


def _error(exc: Exception, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(exc), "type": type(exc).__name__})


def _json(data: object, status_code: int = 200) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except Exception:
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                np.ndarray: lambda arr: arr.tolist(),
            },
        ),
    )


@app.get("/meta/categories")
def meta_categories():
    try:
        return _json({"values": load_catalog_data()["categories"]})
    except Exception as exc:
        logger.exception("meta_categories failed")
        return _error(exc)


@app.get("/meta/price-ranges")
def meta_price_ranges():
    try:
        return _json({"values": load_catalog_data()["price_ranges"]})
    except Exception as exc:
        logger.exception("meta_price_ranges failed")
        return _error(exc)


@app.get("/meta/languages")
def meta_languages():
    try:
        return _json({"values": load_catalog_data()["languages"]})
    except Exception as exc:
        logger.exception("meta_languages failed")
        return _error(exc)


@app.get("/meta/locations")
def meta_locations():
    try:
        return _json({"values": load_catalog_data()["locations"]})
    except Exception as exc:
        logger.exception("meta_locations failed")
        return _error(exc)


@app.get("/home")
def home():
    try:
        return _json(compute_home(load_catalog_data()))
    except Exception as exc:
        logger.exception("home failed")
        return _error(exc)


@app.post("/artists/search")
def search_artists(criteria: CatalogCriteriaModel):
    try:
        crit = normalize_criteria(criteria.model_dump())
        return _json(compute_catalog(crit, load_catalog_data()))
    except Exception as exc:
        logger.exception("search_artists failed")
        return _error(exc)


@app.get("/dashboard")
def dashboard():
    try:
        return _json(compute_dashboard(load_catalog_data()))
    except Exception as exc:
        logger.exception("dashboard failed")
        return _error(exc)


@app.post("/artists/{artist_id}/quote")
def request_quote(artist_id: str):
    try:
        result = _hooks().on_quote_request(artist_id)
        return _json(asdict(result), status_code=200 if result.accepted else 404)
    except Exception as exc:
        logger.exception("request_quote failed")
        return _error(exc)


@app.post("/bookings/{request_id}/status")
def update_status(request_id: str, body: StatusUpdateModel):
    try:
        result = _hooks().on_status_update(request_id, body.status)
        return _json(asdict(result), status_code=200 if result.accepted else 404)
    except ValueError as exc:
        return _error(exc, status_code=422)
    except Exception as exc:
        logger.exception("update_status failed")
        return _error(exc)


@app.post("/onboard")
async def onboard(application: ArtistApplication):
    try:
        receipt = await submit_application(application)
        return _json(asdict(receipt))
    except Exception as exc:
        logger.exception("onboard failed")
        return _error(exc)


@app.get("/export/{page}")
def export_page(page: str):
    data_ctx = load_catalog_data()

    export_df = None
    filename = f"{page}.csv"
    if page == "artists":
        export_df = data_ctx.get("artists_df")
    elif page in {"bookings", "dashboard"}:
        export_df = data_ctx.get("bookings_df")
        filename = "bookings.csv"
    else:
        export_df = pd.DataFrame()

    csv_bytes = export_frame(export_df).to_csv(index=False).encode("utf-8")
    return Response(content=csv_bytes, media_type="text/csv", headers={"Content-Disposition": f"attachment; filename={filename}"})
