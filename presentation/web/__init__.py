"""Web presentation: FastAPI app and presenter page."""
from .app import create_app

__all__ = ["create_app"]
