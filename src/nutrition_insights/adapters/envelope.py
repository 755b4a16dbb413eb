"""Helpers for the ``{success, data, error}`` envelope used by the backend."""

import httpx

from nutrition_insights.errors import ProviderError


async def send(
    http_client: httpx.AsyncClient, method: str, url: str, **kwargs: object
) -> object:
    """Send a request and return the envelope's ``data``.

    Transport failures, error statuses and ``success: false`` envelopes all
    raise ProviderError.
    """
    try:
        response = await http_client.request(method, url, **kwargs)
    except httpx.HTTPError as exc:
        raise ProviderError(f"{method} {url} failed: {exc}") from exc
    return unwrap(response)


def unwrap(response: httpx.Response) -> object:
    """Return the ``data`` member of a successful envelope."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if response.is_error:
        raise ProviderError(
            _error_text(payload) or f"HTTP {response.status_code}",
            status_code=response.status_code,
        )
    if not isinstance(payload, dict) or not payload.get("success"):
        raise ProviderError(
            _error_text(payload) or "Unsuccessful provider response",
            status_code=response.status_code,
        )
    return payload.get("data")


def _error_text(payload: object) -> str | None:
    if isinstance(payload, dict):
        error = payload.get("error") or payload.get("message")
        if error:
            return str(error)
    return None


def auth_headers(api_token: str | None) -> dict[str, str]:
    """Return bearer auth headers when a token is configured."""
    if not api_token:
        return {}
    return {"Authorization": f"Bearer {api_token}"}
