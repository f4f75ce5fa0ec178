"""Database model type definitions."""

from src.models.brand import Brand
from src.models.category import Category
from src.models.order import Order, OrderStatus, PaymentMethod
from src.models.product import Product
from src.models.shipping import STATE_CODES, ShippingRow

__all__ = [
    "Brand",
    "Category",
    "Order",
    "OrderStatus",
    "PaymentMethod",
    "Product",
    "STATE_CODES",
    "ShippingRow",
]
