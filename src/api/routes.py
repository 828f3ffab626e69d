"""REST API routes: status query, watering command."""

import json
import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from control.controller_state import ControllerState
from control.errors import DriverFailure

from .auth import require_api_key
from .errors import InvalidRequest
from .schemas import ErrorResponse, StatusResponse, WaterRequest, WaterResponse

logger = logging.getLogger(__name__)
router = APIRouter(
    tags=["api"],
    dependencies=[Depends(require_api_key)],
    responses={401: {"model": ErrorResponse}},
)


def get_controller(request: Request) -> ControllerState:
    """Get the shared controller state created at startup."""
    return request.app.state.controller


async def read_water_request(request: Request) -> WaterRequest:
    """Parse the body after the API key check; anything but {'action': 'start'} is rejected."""
    try:
        payload = json.loads(await request.body())
    except ValueError as e:
        logger.warning(f"Malformed watering request body: {e}")
        raise InvalidRequest()

    try:
        return WaterRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Unsupported watering request: {payload!r} ({e.error_count()} error(s))")
        raise InvalidRequest()


@router.get("/status", response_model=StatusResponse)
async def get_status(controller: ControllerState = Depends(get_controller)):
    """Get controller status without waiting on a running drive."""
    return StatusResponse(
        status="Ready",
        message="Server is ready",
        server_mode=controller.server_mode,
        controlled_pin=controller.pin,
    )


@router.post(
    "/water",
    response_model=WaterResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": WaterRequest.model_json_schema()}},
        }
    },
)
async def start_watering(request: Request, controller: ControllerState = Depends(get_controller)):
    """Run the pump once for the fixed duration (queues behind a running drive)."""
    await read_water_request(request)

    logger.info(f"Watering request received ({controller.duration:g}s)")
    try:
        result = await controller.water()
    except DriverFailure as e:
        logger.error(f"Watering failed: {e}")
        raise
    mode = "simulation" if result.simulated else "live"
    logger.info(f"✓ Watering complete ({result.duration:g}s, {mode})")

    return WaterResponse(
        status="success",
        message=f"Watering ({result.duration:g}s) completed in {mode} mode",
        gpio_result=result.describe(),
    )
