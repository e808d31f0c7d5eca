from __future__ import annotations

import logging
import time

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from moodsong.logging_utils import (
    clear_request_context,
    configure_logging,
    current_request_id,
    log_event,
    new_request_id,
    request_elapsed_ms,
    set_request_context,
)
from moodsong.models import KeyRecommendation, MoodAnalysis, MoodRequest, ProgressionCatalogResponse, Song, SongRequest
from moodsong.services.key_recommender import recommend_key
from moodsong.services.mood_interpreter import apply_style_hint, interpret_mood
from moodsong.services.progression_library import catalog
from moodsong.services.song_generator import TheoryConfigurationError, generate_song

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Mood Song")


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or new_request_id()
    set_request_context(request_id=request_id, route=request.url.path, method=request.method)
    started = time.perf_counter()
    log_event(logger, "request_started")
    try:
        response = await call_next(request)
    except Exception:
        log_event(logger, "request_completed", status_code=500, duration_ms=request_elapsed_ms(started))
        raise

    log_event(logger, "request_completed", status_code=response.status_code, duration_ms=request_elapsed_ms(started))
    response.headers["X-Request-ID"] = request_id
    clear_request_context()
    return response


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    request_id = current_request_id()
    logger.exception(
        "unhandled_exception",
        extra={"event": "unhandled_exception", "request_id": request_id},
    )
    response = JSONResponse(
        status_code=500,
        content={
            "detail": "Something went wrong while processing your request. Please try again.",
            "request_id": request_id,
        },
        headers={"X-Request-ID": request_id},
    )
    clear_request_context()
    return response


def _handle_user_error(action: str, exc: ValueError) -> HTTPException:
    log_event(logger, "request_failed", level=logging.WARNING, action=action, reason=str(exc))
    return HTTPException(
        status_code=422,
        detail={
            "message": f"{action} failed. Please adjust inputs and try again.",
            "request_id": current_request_id(),
        },
    )


def _handle_configuration_error(action: str, exc: TheoryConfigurationError) -> HTTPException:
    log_event(logger, "request_failed", level=logging.ERROR, action=action, reason=str(exc))
    return HTTPException(
        status_code=500,
        detail={
            "message": f"{action} is unavailable: the music theory tables are misconfigured.",
            "request_id": current_request_id(),
        },
    )


@app.get("/api/health")
def health_endpoint():
    return {"ok": True}


@app.post("/api/generate-song", response_model=Song)
def generate_song_endpoint(payload: SongRequest):
    log_event(
        logger,
        "song_request_received",
        mood_length=len(payload.mood),
        key=payload.key.id if payload.key else None,
        style=payload.style,
        complexity=payload.complexity,
    )
    try:
        return generate_song(payload)
    except TheoryConfigurationError as exc:
        raise _handle_configuration_error("Song generation", exc) from exc
    except ValueError as exc:
        raise _handle_user_error("Song generation", exc) from exc


@app.post("/api/recommend-key", response_model=KeyRecommendation)
def recommend_key_endpoint(payload: MoodRequest):
    try:
        return recommend_key(payload.mood)
    except ValueError as exc:
        raise _handle_user_error("Key recommendation", exc) from exc


@app.post("/api/analyze-mood", response_model=MoodAnalysis)
def analyze_mood_endpoint(payload: MoodRequest):
    try:
        analysis = interpret_mood(payload.mood)
        return apply_style_hint(analysis, payload.style)
    except ValueError as exc:
        raise _handle_user_error("Mood analysis", exc) from exc


@app.get("/api/progressions", response_model=ProgressionCatalogResponse)
def progressions_endpoint():
    return ProgressionCatalogResponse(progressions=list(catalog()))
