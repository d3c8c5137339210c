# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from src.api.v1 import (
    communities,
    currencies,
    document_types,
    locations,
    rbac,
    users,
)

api_router = APIRouter()

# RBAC routes
api_router.include_router(rbac.router, tags=["rbac"])

# User routes
api_router.include_router(users.router, tags=["users"])

# Reference data routes
api_router.include_router(locations.router, tags=["locations"])
api_router.include_router(currencies.router, tags=["currencies"])
api_router.include_router(
    document_types.router, prefix="/document-types", tags=["document-types"]
)

# Community routes (posts and comments nested under communities)
api_router.include_router(
    communities.router, prefix="/communities", tags=["communities"]
)
