"""
API package - HTTP transport: routers, dependencies, middleware.
"""
