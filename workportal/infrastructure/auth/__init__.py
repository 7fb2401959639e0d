from .jwt_handler import JWTHandler
from .supabase_auth import SupabaseAuthService

__all__ = ["JWTHandler", "SupabaseAuthService"]
