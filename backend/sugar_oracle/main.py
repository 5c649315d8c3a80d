from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sugar_oracle.core.config import Settings, settings as default_settings
from sugar_oracle.core.log import configure_logging
from sugar_oracle.routers import candy, health, price
from sugar_oracle.services.clock import Clock, SystemClock
from sugar_oracle.services.waveform_oracle import WaveformOracle
from sugar_oracle.storage.db import init_db, load_starting_time, save_starting_time

logger = logging.getLogger(__name__)

def build_oracle(clock: Clock, settings: Settings) -> WaveformOracle:
    """One oracle per app. With a database configured the start instant survives restarts."""
    if not settings.database_path:
        return WaveformOracle.initialize(clock)

    init_db(settings.database_path)
    stored = load_starting_time(settings.database_path)
    if stored is not None:
        logger.info("Restoring oracle start time %s from %s", stored, settings.database_path)
        return WaveformOracle.restore(stored, clock)

    oracle = WaveformOracle.initialize(clock)
    save_starting_time(settings.database_path, oracle.starting_time)
    # another instance may have won the insert; the stored row is authoritative
    return WaveformOracle.restore(load_starting_time(settings.database_path), clock)

def create_app(clock: Optional[Clock] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    clock = clock or SystemClock()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        app.state.oracle = build_oracle(clock, settings)
        logger.info("Sugar price oracle started at %s (env=%s)", app.state.oracle.starting_time, settings.app_env)
        yield

    app = FastAPI(title="Sugar Price Oracle API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/api")
    app.include_router(price.router, prefix="/api")
    app.include_router(candy.router, prefix="/api")

    return app

app = create_app()
