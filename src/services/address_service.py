"""Postal code (CEP) resolution through ViaCEP."""

import logging
import re

import httpx

from src.api.middleware.error_handler import AddressLookupError, NotFoundError, ValidationError
from src.core.config import get_settings
from src.schemas.address import AddressResponse

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")


def clean_cep(cep: str) -> str:
    """Strip formatting from a postal code.

    Raises:
        ValidationError: If the result is not exactly 8 digits.
    """
    digits = _NON_DIGITS.sub("", cep or "")
    if len(digits) != 8:
        raise ValidationError("Postal code must have 8 digits", field="cep")
    return digits


class AddressService:
    """Resolves postal codes to street, neighborhood, city and state.

    One request per call, no retries.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
    ) -> None:
        """Initialize address service.

        Args:
            http_client: Optional HTTP client for testing.
            base_url: Lookup service base URL, defaults to settings.
        """
        self._http_client = http_client
        self.base_url = (base_url or get_settings().address_lookup_url).rstrip("/")

    async def _fetch(self, url: str) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.get(url)
        async with httpx.AsyncClient() as client:
            return await client.get(url)

    async def resolve(self, cep: str) -> AddressResponse:
        """Look up a postal code.

        Args:
            cep: Postal code, with or without formatting.

        Returns:
            AddressResponse: The resolved address.

        Raises:
            ValidationError: If the postal code is malformed.
            NotFoundError: If the postal code does not exist.
            AddressLookupError: If the lookup service fails.
        """
        digits = clean_cep(cep)
        url = f"{self.base_url}/{digits}/json/"

        try:
            response = await self._fetch(url)
        except httpx.HTTPError as e:
            logger.error("Address lookup failed for %s: %s", digits, e)
            raise AddressLookupError() from e

        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFoundError("Postal code not found")
        if response.status_code >= 400:
            logger.error("Address lookup returned %s for %s", response.status_code, digits)
            raise AddressLookupError()

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Address lookup returned invalid JSON for %s", digits)
            raise AddressLookupError() from e

        # ViaCEP answers unknown codes with 200 and {"erro": true}
        if not isinstance(data, dict) or data.get("erro"):
            raise NotFoundError("Postal code not found")

        return AddressResponse(
            cep=digits,
            rua=data.get("logradouro") or "",
            bairro=data.get("bairro") or "",
            cidade=data.get("localidade") or "",
            estado=(data.get("uf") or "").upper(),
        )
