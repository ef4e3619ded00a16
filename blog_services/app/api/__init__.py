"""
HTTP layer for both services.

Routes are thin: they look up the store owned by the running
application and hand it the request data.  Routers for each service
live in ``endpoints`` and are mounted at the root path.
"""
