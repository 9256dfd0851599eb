"""Database models — re-exports all models.

Import from here:  from users_api.models import Base, User
"""

from .base import Base  # noqa: F401
from .user import MAX_USER_ID, MIN_USER_ID, User  # noqa: F401
