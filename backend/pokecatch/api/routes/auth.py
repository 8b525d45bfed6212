"""Auth Routes — registration and login.

Invariants:
    - Duplicate email → 409 envelope, never a 500
    - Login responses carry the token only on a verified password match
    - Request bodies validated by Pydantic before reaching the handler
"""

import logging

from fastapi import APIRouter, Depends, status

from pokecatch.api.dependencies import get_auth_service
from pokecatch.schemas.auth import (
    Credentials, LoginCredentials, LoginResponse, RegisterResponse,
)
from pokecatch.services.auth_service import AuthService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post(
    "/register", response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: Credentials, auth: AuthService = Depends(get_auth_service),
):
    """Create an account for email."""
    await auth.register(body.email, body.password)
    return RegisterResponse(
        message=f"{body.email} created successfully", email=body.email,
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginCredentials, auth: AuthService = Depends(get_auth_service),
):
    """Exchange email/password for a bearer token."""
    token = await auth.login(body.email, body.password)
    return LoginResponse(
        token=token,
        expires_in=int(auth.tokens.ttl.total_seconds()),
    )
