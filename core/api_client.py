import logging
from typing import Any, Dict, NamedTuple

import httpx

logger = logging.getLogger("storefront.client")


class ApiResult(NamedTuple):
    data: Any
    error: str | None


class TableApiClient:
    """
    HTTP client for the table endpoints.

    Every call returns an ApiResult and never raises: server errors, non-JSON
    responses and transport failures all come back as `error`.
    """

    def __init__(self, http: httpx.Client, base_url: str = ""):
        self.http = http
        self.base_url = base_url.rstrip("/")

    def table_page(self, table_id: Any, params: Dict[str, Any] | None = None) -> ApiResult:
        return self._post(f"/table/{table_id}", params or {}, "Failed to fetch table data")

    def table_create(self, table_id: Any, data: Dict[str, Any]) -> ApiResult:
        return self._post(f"/table/create/{table_id}", data, "Failed to create record")

    def table_update(self, table_id: Any, data: Dict[str, Any]) -> ApiResult:
        return self._post(f"/table/update/{table_id}", data, "Failed to update record")

    def table_delete(self, table_id: Any, record_id: Any) -> ApiResult:
        result = self._post(f"/table/delete/{table_id}", {"id": record_id}, "Failed to delete record")
        if result.error is None:
            return ApiResult(data=True, error=None)
        return result

    def _post(self, path: str, payload: Dict[str, Any], fallback_error: str) -> ApiResult:
        url = f"{self.base_url}{path}"
        try:
            response = self.http.post(url, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {e}")
            return ApiResult(data=None, error=str(e) or fallback_error)

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            logger.error(f"Non-JSON response from {url}: {response.text}")
            return ApiResult(data=None, error="Server returned non-JSON response")

        try:
            result = response.json()
        except ValueError as e:
            logger.error(f"Malformed JSON from {url}: {e}")
            return ApiResult(data=None, error="Server returned non-JSON response")

        if isinstance(result, dict) and result.get("success"):
            return ApiResult(data=result.get("data"), error=None)

        error = result.get("error") if isinstance(result, dict) else None
        return ApiResult(data=None, error=error or fallback_error)
