"""
Application package initializer.

Both services are assembled from the same building blocks: settings
and logging in ``core``, request and response models in ``schemas``,
the in‑memory stores in ``services`` and the HTTP routes in
``api/endpoints``.  The posts and comments applications share no
state; each one owns its store for the lifetime of the process.
"""

from .main import comments_app, posts_app  # noqa: F401
