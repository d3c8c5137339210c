"""Services package."""
from src.services import (
    community_service,
    crud_service,
    grant_service,
    user_service,
)

__all__ = [
    "community_service",
    "crud_service",
    "grant_service",
    "user_service",
]
