"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- controllers/: per-request boundary adapters calling application handlers
- dependencies/: FastAPI dependencies (authentication)
- errors.py: the boundary translator (error -> HTTP status + message)
"""
