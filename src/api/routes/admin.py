"""Admin session routes."""

from fastapi import APIRouter

from src.api.deps import AdminUser
from src.schemas.auth import AdminVerifyResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/verify",
    response_model=AdminVerifyResponse,
    summary="Verify admin token",
    description="Returns 200 with the admin identity when the bearer token is valid, 401 otherwise.",
    responses={401: {"description": "Missing, invalid or expired token"}},
)
async def verify_admin(admin: AdminUser) -> AdminVerifyResponse:
    return AdminVerifyResponse(valid=True, admin=admin)
