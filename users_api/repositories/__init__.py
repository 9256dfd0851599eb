"""
repositories/ — Data access layer.

Repositories own every SQL statement. Services call them and never touch
the Session directly.
"""

from .user_repository import UserRecord, UserRepository  # noqa: F401
