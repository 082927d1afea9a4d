"""api — FastAPI application and routes."""
