"""Async HTTP client for the Travel Journal API."""

from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, TypeAdapter

from traveljournal.models.base import WireModel
from traveljournal.models.config import APIConfig
from traveljournal.services.exceptions import (
    APIError,
    DecodingError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from traveljournal.utils.logging import get_logger


logger = get_logger(__name__)


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _group_field_errors(items: List[Any]) -> Dict[str, List[str]]:
    grouped: Dict[str, List[str]] = {}
    for item in items:
        if isinstance(item, dict) and "field" in item and "message" in item:
            grouped.setdefault(str(item["field"]), []).append(str(item["message"]))
    return grouped


def parse_api_error(status_code: int, body: Any) -> APIError:
    """
    Map an error response to an APIError.

    400/422 bodies are tried in this order:
    1. {"errors": [{"field": ..., "message": ...}]} -> ValidationError
    2. ProblemDetails {"detail": ..., "errors": {field: [messages]}}
    3. {"error": "message"} -> ServerError

    Args:
        status_code: HTTP status of the response
        body: Decoded JSON body, or None if it wasn't JSON

    Returns:
        The most specific APIError for the response
    """
    if status_code == 401:
        return UnauthorizedError()
    if status_code == 403:
        return ForbiddenError()
    if status_code == 404:
        return NotFoundError()

    payload = body if isinstance(body, dict) else {}

    if status_code in (400, 422):
        errors = payload.get("errors")
        if isinstance(errors, list):
            grouped = _group_field_errors(errors)
            if grouped:
                return ValidationError(grouped, status_code=status_code)

        if isinstance(errors, dict) and errors:
            problem_errors = {
                str(field): [str(m) for m in (messages if isinstance(messages, list) else [messages])]
                for field, messages in errors.items()
            }
            return ValidationError(problem_errors, status_code=status_code)

        if isinstance(payload.get("detail"), str):
            return ServerError(payload["detail"], status_code=status_code)

        if isinstance(payload.get("error"), str):
            return ServerError(payload["error"], status_code=status_code)

        return APIError("Unrecognized error response", status_code=status_code)

    if 500 <= status_code <= 599:
        detail = payload.get("detail")
        return ServerError(
            detail if isinstance(detail, str) else "Internal server error",
            status_code=status_code,
        )

    return APIError(f"Unexpected response status {status_code}", status_code=status_code)


class APIClient:
    """
    Thin JSON client over httpx.AsyncClient.

    Bodies are WireModels (sent in their camelCase wire form); responses are
    validated into the requested model. Auth is limited to forwarding the
    configured bearer token.

    Example:
        >>> client = APIClient(APIConfig(base_url="http://localhost:5000/api"))
        >>> draft = await client.request("GET", f"/trips/{trip_id}/draft", response_model=EditorResponse)
    """

    def __init__(self, config: APIConfig):
        self.config = config
        self.base_url = str(config.base_url).rstrip("/")
        self.timeout = httpx.Timeout(config.timeout)

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.config.access_token:
            headers["Authorization"] = f"Bearer {self.config.access_token}"
        return headers

    async def _send(
        self, method: str, endpoint: str, body: Optional[BaseModel] = None
    ) -> httpx.Response:
        url = self.base_url + endpoint
        payload = None
        if body is not None:
            payload = body.to_wire() if isinstance(body, WireModel) else body.model_dump(mode="json")

        logger.info("api_request_started", method=method, endpoint=endpoint)
        logger.debug("api_request_payload", method=method, endpoint=endpoint, payload=payload)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(method, url, json=payload, headers=self._headers())
        except httpx.TimeoutException as e:
            logger.error("api_request_timeout", method=method, endpoint=endpoint, error=str(e))
            raise TransportError(f"Request timed out: {method} {endpoint}") from e
        except httpx.HTTPError as e:
            logger.error("api_request_failed", method=method, endpoint=endpoint, error=str(e))
            raise TransportError(f"Request failed: {method} {endpoint}: {e}") from e

        logger.info(
            "api_request_completed",
            method=method,
            endpoint=endpoint,
            status_code=response.status_code,
        )

        if not 200 <= response.status_code <= 299:
            error = parse_api_error(response.status_code, _json_or_none(response))
            logger.error(
                "api_error_response",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
                error=str(error),
            )
            raise error

        return response

    async def request(
        self,
        method: str,
        endpoint: str,
        response_model: Any,
        body: Optional[BaseModel] = None,
    ) -> Any:
        """
        Send a request and decode the JSON response.

        Args:
            method: HTTP method
            endpoint: Path below the configured base URL, e.g. "/themes"
            response_model: Type to validate the body into (model or e.g. List[Model])
            body: Optional request body

        Returns:
            Validated instance of response_model

        Raises:
            APIError: On transport failure, error status, or undecodable body
        """
        response = await self._send(method, endpoint, body)
        try:
            return TypeAdapter(response_model).validate_python(response.json())
        except ValueError as e:
            logger.error("api_decoding_error", method=method, endpoint=endpoint, error=str(e))
            raise DecodingError(
                f"Unexpected response body for {method} {endpoint}: {e}",
                status_code=response.status_code,
            ) from e

    async def request_void(
        self, method: str, endpoint: str, body: Optional[BaseModel] = None
    ) -> None:
        """Send a request whose response body is ignored.

        Raises:
            APIError: On transport failure or error status
        """
        await self._send(method, endpoint, body)
