"""
Endpoint modules.

``posts`` is included by the posts application and ``comments`` by the
comments application.  The two routers never share a store.
"""
