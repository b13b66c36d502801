"""API routers for Todo Service."""
