"""Admin authentication schemas for bearer tokens."""

from pydantic import BaseModel, ConfigDict, Field


class AdminContext(BaseModel):
    """Authenticated admin for the current request."""

    model_config = ConfigDict(from_attributes=True)

    admin_id: int = Field(description="Admin identifier (from the sub claim)")
    username: str | None = Field(default=None, description="Admin login name")


class AdminTokenPayload(BaseModel):
    """Claims carried by an admin bearer token."""

    model_config = ConfigDict(from_attributes=True)

    sub: str = Field(description="Subject - the admin id")
    usuario: str | None = Field(default=None, description="Admin login name")
    exp: int = Field(description="Expiration timestamp (Unix epoch)")
    iat: int = Field(description="Issued at timestamp (Unix epoch)")

    def to_admin_context(self) -> AdminContext:
        """Convert token payload to AdminContext.

        Returns:
            AdminContext: Admin context derived from token claims.
        """
        return AdminContext(admin_id=int(self.sub), username=self.usuario)


class AdminVerifyResponse(BaseModel):
    """Response for GET /admin/verify."""

    valid: bool = Field(default=True, description="Token is valid")
    admin: AdminContext = Field(description="Authenticated admin")
