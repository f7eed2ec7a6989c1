"""In-memory JSON record store exposed over a FastAPI CRUD interface."""
from recordstore.app import create_app

__all__ = ["create_app"]
