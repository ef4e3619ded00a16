"""
Entrypoints for the posts and comments services.

This module assembles the two FastAPI applications.  Each factory sets
up logging, creates the store the application owns, registers the
error handlers and includes the service's router.  Both applications
are also instantiated at import time so they can be served directly,
e.g.::

    uvicorn blog_services.app.main:posts_app --port 4000
    uvicorn blog_services.app.main:comments_app --port 4001

Pass a ``Settings`` or a pre‑built store to the factories to get an
isolated application, which is what the test suite does.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI

from .api.endpoints import comments, posts
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import service_logger, setup_logging
from .services.comment_store import CommentStore
from .services.post_store import PostStore


def _build_app(service: str, port: int, router: APIRouter, settings: Settings) -> FastAPI:
    # Initialise logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)
    logger = service_logger(service)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("%s service listening on port %s", service.capitalize(), port)
        yield
        logger.info("%s service shutting down", service.capitalize())

    app = FastAPI(
        title=f"{settings.project_name}: {service}",
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    register_exception_handlers(app, service)
    app.include_router(router, tags=[service])
    return app


def create_posts_app(settings: Optional[Settings] = None, store: Optional[PostStore] = None) -> FastAPI:
    """Create the posts application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the module‑level settings.
    store : Optional[PostStore]
        Store to serve from.  A new empty store is created if omitted.

    Returns
    -------
    FastAPI
        A configured application with the store on ``app.state.post_store``.
    """
    settings = settings or default_settings
    app = _build_app("posts", settings.posts_port, posts.router, settings)
    if store is None:
        store = PostStore(id_bytes=settings.id_bytes, strict=settings.strict_payloads)
    app.state.post_store = store
    return app


def create_comments_app(settings: Optional[Settings] = None, store: Optional[CommentStore] = None) -> FastAPI:
    """Create the comments application.

    Same contract as ``create_posts_app``; the store ends up on
    ``app.state.comment_store``.
    """
    settings = settings or default_settings
    app = _build_app("comments", settings.comments_port, comments.router, settings)
    if store is None:
        store = CommentStore(id_bytes=settings.id_bytes, strict=settings.strict_payloads)
    app.state.comment_store = store
    return app


posts_app = create_posts_app()
comments_app = create_comments_app()
