"""FastAPI dependencies: the application's entity store and caller address."""
from fastapi import Request

from pharmacare.db.store import EntityStore


def get_store(request: Request) -> EntityStore:
    """The store built for this application instance in create_app()."""
    return request.app.state.store


def client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"
