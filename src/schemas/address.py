"""Address lookup schemas."""

from pydantic import BaseModel, Field


class AddressResponse(BaseModel):
    """Structured address resolved from a postal code."""

    cep: str = Field(description="Postal code, digits only")
    rua: str = Field(default="", description="Street")
    bairro: str = Field(default="", description="Neighborhood")
    cidade: str = Field(default="", description="City")
    estado: str = Field(default="", description="Two-letter state code")
