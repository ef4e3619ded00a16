"""
In‑memory stores backing the services.

Each store is a plain object owning its data for the lifetime of the
process.  The application factories construct one store per app and
keep it on ``app.state``; nothing here is a module‑level global.
"""

from .comment_store import CommentStore  # noqa: F401
from .post_store import PostStore  # noqa: F401
