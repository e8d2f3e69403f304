"""
Client for the upstream shopping cart API.

The upstream service owns the canonical cart; every call returns what the
server answered, unwrapped from its {"data": ...} envelope. Requests carry
the caller's access token as a bearer header.
"""

from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from core.config import CART_API_TIMEOUT, CART_API_URL
from core.logging import get_logger
from schemas.cart import CartItem

logger = get_logger(__name__)


class CartAPIError(Exception):
    """The cart API could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CartAuthError(CartAPIError):
    """The cart API rejected the caller's credentials."""


class CartAPIClient:
    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: str = CART_API_URL,
        timeout: float = CART_API_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "CartAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()

    def _headers(self) -> Dict[str, str]:
        if not self.access_token:
            return {}
        return {"Authorization": f"Bearer {self.access_token}"}

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = await self._http_client.request(method, url, json=json, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error("Cart API %s %s failed: %s", method, path, e)
            raise CartAPIError(f"Cart API unreachable: {e}") from e

        if response.status_code in (401, 403):
            logger.warning("Cart API %s %s rejected credentials (%d)", method, path, response.status_code)
            raise CartAuthError("Cart API rejected credentials", status_code=response.status_code)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Cart API %s %s returned %d", method, path, response.status_code)
            raise CartAPIError(f"Cart API error: {response.status_code}", status_code=response.status_code) from e

        if not response.content:
            return None
        try:
            body = response.json()
        except ValueError as e:
            logger.error("Cart API %s %s returned a non-JSON body", method, path)
            raise CartAPIError("Cart API returned an unreadable response", status_code=response.status_code) from e
        return body.get("data") if isinstance(body, dict) else body

    async def fetch_cart(self) -> List[Dict[str, Any]]:
        """GET /shoppingCart - the signed-in user's line items."""
        data = await self._request("GET", "/shoppingCart")
        try:
            return [CartItem.model_validate(item).model_dump(by_alias=True) for item in data or []]
        except ValidationError as e:
            logger.error("Cart API returned malformed line items: %s", e)
            raise CartAPIError("Cart API returned malformed line items") from e

    async def get_line_item(self, item_id: Any) -> Any:
        return await self._request("GET", f"/shoppingCart/{item_id}")

    async def create_line_item(self, product_variant_id: Any, quantity: int) -> Any:
        payload = {"productVariantId": product_variant_id, "quantity": quantity}
        return await self._request("POST", "/shoppingCart", json=payload)

    async def update_line_item_quantity(self, item_id: Any, quantity: int) -> Any:
        return await self._request("PUT", f"/shoppingCart/{item_id}", json={"quantity": quantity})

    async def delete_line_item(self, item_id: Any) -> Any:
        return await self._request("DELETE", f"/shoppingCart/{item_id}")
