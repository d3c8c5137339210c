"""Pydantic schemas package."""
from src.schemas.common import HealthResponse
from src.schemas.community import (
    CommentCreate,
    CommentResponse,
    CommentUpdate,
    CommunityCreate,
    CommunityResponse,
    CommunityUpdate,
    PostCreate,
    PostResponse,
    PostUpdate,
)
from src.schemas.rbac import (
    PermissionChangeSchema,
    PermissionSchema,
    RoleTemplateSchema,
    UserPermissionsSchema,
)
from src.schemas.reference import (
    CurrencyCreate,
    CurrencyResponse,
    CurrencyUpdate,
    DocumentTypeCreate,
    DocumentTypeResponse,
    DocumentTypeUpdate,
    LocationCreate,
    LocationResponse,
    LocationUpdate,
)
from src.schemas.user import UserCreate, UserResponse, UserStatusUpdate

__all__ = [
    "CommentCreate",
    "CommentResponse",
    "CommentUpdate",
    "CommunityCreate",
    "CommunityResponse",
    "CommunityUpdate",
    "CurrencyCreate",
    "CurrencyResponse",
    "CurrencyUpdate",
    "DocumentTypeCreate",
    "DocumentTypeResponse",
    "DocumentTypeUpdate",
    "HealthResponse",
    "LocationCreate",
    "LocationResponse",
    "LocationUpdate",
    "PermissionChangeSchema",
    "PermissionSchema",
    "RoleTemplateSchema",
    "UserCreate",
    "UserPermissionsSchema",
    "UserResponse",
    "UserStatusUpdate",
]
