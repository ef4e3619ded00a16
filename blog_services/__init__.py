"""
Top‑level package for the blog services.

The package hosts two independent HTTP services, one for posts and one
for comments, which live in the ``app`` subpackage.  Use fully
qualified names such as ``blog_services.app.main`` when importing or
when pointing an ASGI server at one of the applications.
"""

__all__ = []
