"""Unified entry point for the posts and comments services.

This script launches the posts service, the comments service, or both
concurrently in one process.  Each service keeps its own store, so
running them together shares nothing but the event loop.

Hosts and ports come from the ``POSTS_HOST``/``POSTS_PORT`` and
``COMMENTS_HOST``/``COMMENTS_PORT`` environment variables (defaults
``0.0.0.0``, 4000 and 4001).

Usage:
    python run.py            # both services
    python run.py posts      # posts only
"""
import argparse
import asyncio
import logging
from typing import List

from uvicorn import Config, Server

from blog_services.app.core.config import settings
from blog_services.app.main import comments_app, posts_app

SERVICES = ("posts", "comments")


async def run_posts() -> None:
    """Serve the posts application."""
    config = Config(app=posts_app, host=settings.posts_host, port=settings.posts_port, log_level=settings.log_level.lower(), log_config=None)
    await Server(config).serve()


async def run_comments() -> None:
    """Serve the comments application."""
    config = Config(app=comments_app, host=settings.comments_host, port=settings.comments_port, log_level=settings.log_level.lower(), log_config=None)
    await Server(config).serve()


async def main(services: List[str]) -> None:
    """Run the selected services until one of them stops."""
    runners = {"posts": run_posts, "comments": run_comments}
    tasks = [asyncio.create_task(runners[name]()) for name in services]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the blog services.")
    parser.add_argument(
        "service",
        nargs="?",
        choices=SERVICES + ("all",),
        default="all",
        help="which service to run (default: all)",
    )
    return parser.parse_args(argv)


def cli(argv=None) -> None:
    args = parse_args(argv)
    services = list(SERVICES) if args.service == "all" else [args.service]
    try:
        asyncio.run(main(services))
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    cli()
