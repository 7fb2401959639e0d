"""
Domain services: lifecycle and visibility rules, identity resolution and the auth port.
"""

from .auth_service import AuthProvider, AuthSession
from .identity_service import ProfileResolver
from .lifecycle_service import ProjectLifecycleService, ACTOR_RULES
from .visibility_service import VisibilityService, ProjectScope

__all__ = [
    "AuthProvider",
    "AuthSession",
    "ProfileResolver",
    "ProjectLifecycleService",
    "ACTOR_RULES",
    "VisibilityService",
    "ProjectScope",
]
