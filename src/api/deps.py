"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.api.middleware.auth import AuthError, AuthErrorCode, decode_admin_token
from src.schemas.auth import AdminContext
from src.services.address_service import AddressService
from src.services.brand_service import BrandService
from src.services.category_service import CategoryService
from src.services.checkout_service import CheckoutService
from src.services.pricing_service import PricingEngine, get_pricing_engine
from src.services.product_service import ProductService
from src.services.shipping_service import ShippingService


async def get_current_admin(
    authorization: Annotated[str, Header(description="Bearer token")] = "",
) -> AdminContext:
    """Extract and validate the admin from the Authorization header.

    Args:
        authorization: The Authorization header value (Bearer token).

    Returns:
        AdminContext: The authenticated admin's context.

    Raises:
        HTTPException: 401 if token is missing, invalid, or expired.
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format. Expected: Bearer <token>",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_admin_token(parts[1])
        return payload.to_admin_context()

    except AuthError as e:
        if e.code == AuthErrorCode.TOKEN_EXPIRED:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token has expired",
                headers={"WWW-Authenticate": "Bearer"},
            ) from e

        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    except ValueError as e:
        # sub claim that is not an admin id
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token subject",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


AdminUser = Annotated[AdminContext, Depends(get_current_admin)]


# Service providers, overridable in tests via app.dependency_overrides


def get_checkout_service() -> CheckoutService:
    return CheckoutService()


def get_shipping_service() -> ShippingService:
    return ShippingService()


def get_address_service() -> AddressService:
    return AddressService()


def get_category_service() -> CategoryService:
    return CategoryService()


def get_brand_service() -> BrandService:
    return BrandService()


def get_product_service() -> ProductService:
    return ProductService()


CheckoutServiceDep = Annotated[CheckoutService, Depends(get_checkout_service)]
ShippingServiceDep = Annotated[ShippingService, Depends(get_shipping_service)]
AddressServiceDep = Annotated[AddressService, Depends(get_address_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
BrandServiceDep = Annotated[BrandService, Depends(get_brand_service)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
PricingEngineDep = Annotated[PricingEngine, Depends(get_pricing_engine)]
