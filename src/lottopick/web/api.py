"""FastAPI app exposing the combination generator."""

from __future__ import annotations

import os
from functools import lru_cache
from threading import Lock

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from lottopick.config import GeneratorConfig, load_config
from lottopick.engine.combination import Combination
from lottopick.engine.generator import CombinationGenerator
from lottopick.storage import JsonFileStore

MAX_COUNT_PER_REQUEST = 20

# The generator is not thread-safe; every call that touches it goes through this lock.
_generator_lock = Lock()


class GenerateRequest(BaseModel):
    """Request payload for the generate endpoint."""

    count: int = Field(default=1, ge=1, le=MAX_COUNT_PER_REQUEST)
    smart_filters: bool | None = None


class CombinationItem(BaseModel):
    """Single stored combination."""

    id: int
    numbers: list[int]
    bonus: int
    timestamp: str
    display: str


class CombinationList(BaseModel):
    """Response payload listing combinations."""

    smart_filters: bool
    combinations: list[CombinationItem]


class GenerateResponse(CombinationList):
    """Response payload for the generate endpoint."""

    saved: bool


app = FastAPI(title="LottoPick", version="0.1.0")


def get_cors_origins() -> list[str]:
    """Resolve allowed CORS origins from env."""

    raw = os.getenv("CORS_ALLOW_ORIGINS", "*").strip()
    if raw == "*":
        return ["*"]
    return [item.strip() for item in raw.split(",") if item.strip()]


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_generator() -> CombinationGenerator:
    """Return the process-wide generator backed by ``LOTTOPICK_STORE_DIR``."""

    store_dir = os.getenv("LOTTOPICK_STORE_DIR", ".lottopick")
    config_path = os.getenv("LOTTOPICK_CONFIG", "").strip()
    config = load_config(config_path) if config_path else GeneratorConfig()
    return CombinationGenerator(config=config, store=JsonFileStore(store_dir))


def _to_item(generator: CombinationGenerator, combination: Combination) -> CombinationItem:
    return CombinationItem(
        id=combination.id,
        numbers=list(combination.numbers),
        bonus=combination.bonus,
        timestamp=combination.timestamp,
        display=generator.format_combination(combination),
    )


def _to_list(generator: CombinationGenerator, combinations: tuple[Combination, ...] | list[Combination]) -> CombinationList:
    return CombinationList(
        smart_filters=generator.use_smart_filters,
        combinations=[_to_item(generator, combination) for combination in combinations],
    )


@app.get("/api/combinations", response_model=CombinationList)
def list_combinations() -> CombinationList:
    """Return the saved archive in insertion order."""

    generator = get_generator()
    with _generator_lock:
        return _to_list(generator, generator.get_all_combinations())


@app.post("/api/combinations", response_model=GenerateResponse)
def generate_combinations(payload: GenerateRequest) -> GenerateResponse:
    """Generate and save ``count`` combinations.

    ``smart_filters`` applies to this request only.
    """

    generator = get_generator()
    with _generator_lock:
        previous = generator.use_smart_filters
        if payload.smart_filters is not None:
            generator.set_smart_filters(payload.smart_filters)
        try:
            used = generator.use_smart_filters
            generated = generator.generate_and_save(payload.count)
        finally:
            generator.set_smart_filters(previous)
        return GenerateResponse(
            smart_filters=used,
            combinations=[_to_item(generator, combination) for combination in generated],
            saved=generator.last_save_ok,
        )


@app.delete("/api/combinations")
def clear_combinations() -> dict[str, object]:
    """Delete every saved combination."""

    generator = get_generator()
    with _generator_lock:
        generator.clear_combinations()
        return {"detail": "cleared", "saved": generator.last_save_ok}


@app.delete("/api/combinations/{combination_id}")
def delete_combination(combination_id: int) -> dict[str, object]:
    """Delete the combination with ``combination_id``."""

    generator = get_generator()
    with _generator_lock:
        before = len(generator.get_all_combinations())
        generator.delete_combination(combination_id)
        removed = before - len(generator.get_all_combinations())
        if removed == 0:
            raise HTTPException(status_code=404, detail=f"combination {combination_id} not found")
        return {"detail": "deleted", "removed": removed, "saved": generator.last_save_ok}
