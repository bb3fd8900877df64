"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Routes: FastAPI route handlers
- Dependencies: Dependency injection setup
- Errors: mapping from domain exceptions to HTTP status codes
"""
