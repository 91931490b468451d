"""
Network Error Classification

Maps HTTP status codes and transport failures onto NetworkResult values
with user-facing messages.
"""

import socket
import ssl
from typing import Any

import httpx

from .result import NetworkResult

HTTP_ERROR_MESSAGES: dict[int, str] = {
    400: "Bad request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not found",
    408: "Request timeout",
    500: "Internal server error",
    502: "Bad gateway",
    503: "Service unavailable",
}

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"
NO_CONNECTION_MESSAGE = "No internet connection"
TIMEOUT_MESSAGE = "Request timeout"
NETWORK_ERROR_MESSAGE = "Network error occurred"


def classify_http_status(code: int) -> NetworkResult[Any]:
    """Map a non-2xx status code to an error result, keeping the code"""
    message = HTTP_ERROR_MESSAGES.get(code, UNKNOWN_ERROR_MESSAGE)
    return NetworkResult.error(message, code)


def classify_transport_failure(exception: BaseException) -> NetworkResult[Any]:
    """
    Map a raised transport failure to a result.

    Connectivity, timeout and generic I/O failures become error results.
    Anything else is wrapped untouched so callers can inspect or log it.
    """
    # Order matters: gaierror and TimeoutError are both OSError subclasses.
    # httpx also reports TLS handshake failures as ConnectError; those are
    # not a connectivity problem.
    if isinstance(exception, httpx.ConnectError) and not _caused_by_tls(exception):
        return NetworkResult.error(NO_CONNECTION_MESSAGE)
    if isinstance(exception, socket.gaierror):
        return NetworkResult.error(NO_CONNECTION_MESSAGE)
    if isinstance(exception, (httpx.TimeoutException, TimeoutError)):
        return NetworkResult.error(TIMEOUT_MESSAGE)
    if isinstance(exception, (httpx.TransportError, OSError)):
        return NetworkResult.error(NETWORK_ERROR_MESSAGE)
    return NetworkResult.failure(exception)


def _caused_by_tls(exception: BaseException) -> bool:
    """Walk the cause chain looking for an ssl error"""
    seen = set()
    current = exception
    while current is not None and id(current) not in seen:
        if isinstance(current, ssl.SSLError):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return False
