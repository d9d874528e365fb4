"""
Authentication routes, proxied to auth-service
"""

from fastapi import APIRouter, status

from app.models.auth import LoginRequest, RegisterRequest
from app.utils.dependencies import Clients
from app.utils.errors import MissingFieldError

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, clients: Clients):
    """Register a new user"""
    if not body.name or not body.email or not body.password:
        raise MissingFieldError("Name, email, and password are required")

    return await clients.auth.register(
        {"name": body.name, "email": body.email, "password": body.password}
    )


@router.post("/login")
async def login(body: LoginRequest, clients: Clients):
    """Login a user; auth-service errors such as 401 are passed through"""
    if not body.email or not body.password:
        raise MissingFieldError("Email and password are required")

    return await clients.auth.login({"email": body.email, "password": body.password})
