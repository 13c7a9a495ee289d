"""FastAPI application entrypoint."""

import random
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.api.city import router as city_router
from src.api.health import router as health_router
from src.config import settings
from src.core.city import ButterflyCity, seed_demo_villagers
from src.core.logging import get_logger, setup_logging

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def build_city() -> ButterflyCity:
    """Create a city from settings."""
    rng = random.Random(settings.RANDOM_SEED)
    city = ButterflyCity(rng=rng, max_events=settings.EVENT_LOG_MAX_EVENTS)
    if settings.SEED_DEMO_VILLAGERS:
        villagers = seed_demo_villagers(city)
        logger.info(f"Demo villagers seeded: {len(villagers)}")
    return city


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing Butterfly City...")
    app.state.city = build_city()
    logger.info("Butterfly City initialized.")

    yield

    logger.info("Shutting down...")
    app.state.city = None


app = FastAPI(title="Butterfly City", lifespan=lifespan)

app.include_router(health_router)
app.include_router(city_router)
