"""HTTP layer: routers, middleware and dependencies"""
