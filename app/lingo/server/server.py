from fastapi import FastAPI

from lingo.api.router import api_router
from lingo.server.lifespan import lifespan


def create_app() -> FastAPI:
    """Create the FastAPI application serving localized messages."""
    app = FastAPI(title="lingo", lifespan=lifespan)
    app.include_router(api_router)
    return app


handler = create_app()
