"""
HTTP layer: routers, middleware and request-scoped dependencies.
"""
