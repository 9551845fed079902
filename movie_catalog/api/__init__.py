"""
HTTP layer: FastAPI application, routers, dependencies and error handlers.
"""
