"""HTTP API: FastAPI app exposing pump status and watering."""
