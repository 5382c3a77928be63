"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Any, AsyncIterator

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from apareri.calculators.capsule import BENCHMARK_OUTFITS, CapsuleResult
from apareri.calculators.multiwear import Category, MultiwearResult
from apareri.config.settings import get_settings
from apareri.monitoring.logging import configure_logging
from apareri.services.notices import EventBuffer, MemoryClipboard
from apareri.services.share import capsule_share_text, multiwear_share_text
from apareri.services.studio import StudioService
from apareri.storage.backend import KeyValueStorage
from apareri.storage.board import (
    Accent,
    BoardEntry,
    BoardStore,
    LookLength,
    LookMode,
    SlitDepth,
)
from apareri.storage.factory import build_storage

RawNumber = int | float | str | None


class CapsuleInput(BaseModel):
    """Raw capsule form values; clamped, never rejected."""

    tops: RawNumber = None
    bottoms: RawNumber = None
    layers: RawNumber = None
    include_layers: bool | str | None = None
    goal: RawNumber = None


class MultiwearInput(BaseModel):
    product_key: str | None = None
    slit_setting: RawNumber = None
    goal: RawNumber = None


class PinInput(BaseModel):
    base: str
    mode: LookMode
    length: LookLength
    slit: SlitDepth
    accent: Accent


def _capsule_payload(result: CapsuleResult) -> dict[str, Any]:
    return {
        "config": asdict(result.config),
        "combos": result.combos,
        "items_used": result.items_used,
        "tier": result.tier,
        "progress_pct": result.progress_pct,
        "goal_progress": result.goal_progress_label,
    }


def _multiwear_payload(result: MultiwearResult) -> dict[str, Any]:
    return {
        "product": {"key": result.product.key, "label": result.product.label},
        "total_ways": result.total_ways,
        "tier": result.tier,
        "categories": {
            category.value: {
                "count": result.counts[category],
                "silhouettes": list(result.active[category]),
            }
            for category in Category
        },
        "detail": {
            "slit_setting": result.slit_setting,
            "no_slit_variants": result.no_slit_variants,
            "slit_variants": result.slit_variants,
        },
        "progress_pct": result.progress_pct,
        "goal_progress": result.goal_progress_label,
    }


def create_app(storage: KeyValueStorage | None = None) -> FastAPI:
    """Initialise the FastAPI application."""

    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level)
        events = EventBuffer()
        board = BoardStore(
            storage or await build_storage(settings),
            key=settings.board_storage_key,
            capacity=settings.board_capacity,
        )
        studio = StudioService(
            board,
            events,
            events,
            MemoryClipboard(),
            cooldown=settings.celebrate_cooldown_ms / 1000,
            reduced_motion=settings.reduced_motion,
        )
        await studio.start()
        app.state.studio = studio
        app.state.events = events
        yield

    app = FastAPI(
        title="APARERI Studio API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
        lifespan=lifespan,
    )

    def _studio(request: Request) -> StudioService:
        return request.app.state.studio

    def _respond(request: Request, body: dict[str, Any]) -> dict[str, Any]:
        notices, celebrations = request.app.state.events.drain()
        body["notices"] = [asdict(notice) for notice in notices]
        body["celebrations"] = [asdict(event) for event in celebrations]
        return body

    def _board_payload(studio: StudioService) -> dict[str, Any]:
        return {
            "count": len(studio.board),
            "capacity": studio.board.capacity,
            "entries": [entry.model_dump(mode="json") for entry in studio.board.entries],
            "cards": studio.board_cards(),
        }

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.get("/benchmark", tags=["capsule"])
    async def benchmark() -> dict[str, int]:
        return {"outfits": BENCHMARK_OUTFITS}

    @app.get("/capsule", tags=["capsule"])
    async def get_capsule(request: Request) -> dict[str, Any]:
        return _respond(request, _capsule_payload(_studio(request).capsule_result()))

    @app.post("/capsule", tags=["capsule"])
    async def update_capsule(payload: CapsuleInput, request: Request) -> dict[str, Any]:
        result = _studio(request).update_capsule(**payload.model_dump())
        return _respond(request, _capsule_payload(result))

    @app.get("/capsule/share", tags=["capsule"])
    async def capsule_share(request: Request) -> dict[str, str]:
        return {"text": capsule_share_text(_studio(request).capsule_result())}

    @app.get("/multiwear", tags=["multiwear"])
    async def get_multiwear(request: Request) -> dict[str, Any]:
        return _respond(request, _multiwear_payload(_studio(request).multiwear_result()))

    @app.post("/multiwear", tags=["multiwear"])
    async def configure_multiwear(payload: MultiwearInput, request: Request) -> dict[str, Any]:
        result = _studio(request).configure_multiwear(**payload.model_dump())
        return _respond(request, _multiwear_payload(result))

    @app.post("/multiwear/toggles/{category}", tags=["multiwear"])
    async def toggle_category(category: Category, request: Request) -> dict[str, Any]:
        studio = _studio(request)
        if not studio.toggle_category(category):
            notices, _ = request.app.state.events.drain()
            raise HTTPException(
                status_code=409,
                detail=[asdict(notice) for notice in notices],
            )
        return _respond(request, _multiwear_payload(studio.multiwear_result()))

    @app.get("/multiwear/share", tags=["multiwear"])
    async def multiwear_share(request: Request) -> dict[str, str]:
        return {"text": multiwear_share_text(_studio(request).multiwear_result())}

    @app.get("/board", tags=["board"])
    async def get_board(request: Request) -> dict[str, Any]:
        return _respond(request, _board_payload(_studio(request)))

    @app.post("/board/pins", tags=["board"], status_code=201)
    async def pin_look(payload: PinInput, request: Request) -> dict[str, Any]:
        studio = _studio(request)
        await studio.pin(BoardEntry.create(**payload.model_dump()))
        return _respond(request, _board_payload(studio))

    @app.delete("/board/pins/{position}", tags=["board"])
    async def remove_look(position: int, request: Request) -> dict[str, Any]:
        studio = _studio(request)
        await studio.remove(position)
        return _respond(request, _board_payload(studio))

    @app.delete("/board", tags=["board"])
    async def clear_board(request: Request) -> dict[str, Any]:
        studio = _studio(request)
        await studio.clear()
        return _respond(request, _board_payload(studio))

    @app.get("/board/summary", tags=["board"])
    async def board_summary(request: Request) -> dict[str, str]:
        return {"text": _studio(request).board_text()}

    @app.post("/board/random", tags=["board"])
    async def random_look(request: Request) -> dict[str, Any]:
        suggestion = _studio(request).randomize_look()
        return _respond(request, {key: value.value for key, value in asdict(suggestion).items()})

    return app


app = create_app()
