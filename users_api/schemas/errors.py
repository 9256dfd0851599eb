"""
schemas/errors.py — Error response model

Shared by the routers and the exception handlers in main.py.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
