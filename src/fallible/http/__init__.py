"""Network client: one HTTP GET per trigger, reported as Outcome."""

from fallible.http.client import HTTP, evaluate_response, get, parse_request_url
from fallible.http.errors import (
    HTTPFailure,
    MalformedRequest,
    MalformedRequestError,
    RequestFailed,
    RequestFailedError,
)

__all__ = [
    "HTTP",
    "HTTPFailure",
    "MalformedRequest",
    "MalformedRequestError",
    "RequestFailed",
    "RequestFailedError",
    "evaluate_response",
    "get",
    "parse_request_url",
]
