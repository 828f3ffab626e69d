"""FastAPI app: pump status and watering over an API-key protected REST API."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from common.config import Config, get_config
from control.controller_state import ControllerState
from control.pump_actuator import create_actuator

from . import routes
from .errors import register_error_handlers

logger = logging.getLogger(__name__)


def build_controller(config: Config) -> ControllerState:
    """Probe the GPIO line once and wrap the resulting actuator."""
    pin = config.water_pump_pin
    actuator = create_actuator(pin, chip_number=config.gpio_chip)
    return ControllerState(actuator, pin=pin, duration=config.water_duration_secs)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    logger.info("=" * 60)
    logger.info("WATERING CONTROL SERVER - STARTING")
    logger.info("=" * 60)

    owns_controller = app.state.controller is None
    try:
        config = app.state.config
        if config is None and (owns_controller or app.state.api_secret_key is None):
            config = get_config()

        if app.state.api_secret_key is None:
            app.state.api_secret_key = config.api_secret_key

        if owns_controller:
            logger.info("Initializing pump controller...")
            app.state.controller = build_controller(config)
        controller = app.state.controller
        logger.info(f"✓ Pump controller ready: pin {controller.pin} ({controller.server_mode})")
        logger.info(f"✓ Watering duration: {controller.duration:g}s")
    except Exception as e:
        logger.critical(f"Startup failed: {e}")
        raise

    yield

    logger.info("Shutting down...")
    if owns_controller and app.state.controller is not None:
        app.state.controller.close()
        app.state.controller = None
    logger.info("✓ Shutdown complete")


def create_app(config: Optional[Config] = None, controller: Optional[ControllerState] = None,
               api_secret_key: Optional[str] = None) -> FastAPI:
    """Create the app; an injected controller skips the hardware probe."""
    app = FastAPI(
        title="Watering Control Server",
        description="Remote pump actuation with GPIO fallback to simulation",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.controller = controller
    app.state.api_secret_key = api_secret_key

    # UI is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(routes.router)
    return app


app = create_app()
