"""HTTP failure types: dual struct+exception for Outcome and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    "HTTPFailure",
    "MalformedRequest",
    "MalformedRequestError",
    "RequestFailed",
    "RequestFailedError",
]


class RequestFailed(msgspec.Struct, frozen=True, gc=False):
    """Transport error or non-2xx status - struct variant for Outcome[T, RequestFailed]."""

    reason: str

    @property
    def message(self) -> str:
        return f"*** Request Failed ***\n{self.reason}"

    def to_exception(self) -> RequestFailedError:
        """Convert to exception for raise-based code."""
        return RequestFailedError(self.reason)


class RequestFailedError(Exception):
    """Transport error or non-2xx status - exception variant."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Request failed\n{reason}")

    def to_struct(self) -> RequestFailed:
        """Convert to struct for Outcome-based code."""
        return RequestFailed(self.reason)


class MalformedRequest(msgspec.Struct, frozen=True, gc=False):
    """URL could not be turned into a request - struct variant."""

    url: str

    @property
    def message(self) -> str:
        return f"*** Malformed Request ***\n{self.url}"

    def to_exception(self) -> MalformedRequestError:
        """Convert to exception for raise-based code."""
        return MalformedRequestError(self.url)


class MalformedRequestError(Exception):
    """URL could not be turned into a request - exception variant."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Malformed request: {url!r}")

    def to_struct(self) -> MalformedRequest:
        """Convert to struct for Outcome-based code."""
        return MalformedRequest(self.url)


type HTTPFailure = RequestFailed | MalformedRequest
