"""
Middleware package.
"""

from app.middleware.auth import (
    get_current_user,
    get_current_user_optional,
    require_admin,
    get_session_id,
)

__all__ = [
    "get_current_user",
    "get_current_user_optional",
    "require_admin",
    "get_session_id",
]
