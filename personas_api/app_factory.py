"""Entry points for the Personas FastAPI app."""
from personas_api.app import app, create_app

__all__ = ["app", "create_app"]
