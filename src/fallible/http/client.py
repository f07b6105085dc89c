"""Single-endpoint HTTP GET reported through Outcome.

The callback form mirrors a completion-handler API: HTTP.get() builds a
trigger, each trigger call runs one request on a worker thread and hands
the Outcome to the handler on that thread. HTTP.fetch() is the async
equivalent returning the Outcome directly.

Usage:
    >>> def report(outcome: Outcome[bytes, HTTPFailure]) -> None:
    ...     outcome.on_each(
    ...         on_success=lambda body: print(len(body)),
    ...         on_failure=lambda failure: print(failure.message),
    ...     )
    >>> with HTTP() as http:
    ...     http.get("https://example.com/persons.json", report)().result()
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any

import httpx

from fallible._logging import get_logger
from fallible.config import ClientConfig, current_config
from fallible.http.errors import HTTPFailure, MalformedRequest, RequestFailed
from fallible.types.outcome import Failure, Success

__all__ = ["HTTP", "evaluate_response", "get", "parse_request_url"]

logger = get_logger(__name__)

SUCCESS_RANGE = range(200, 300)
NO_STATUS = "NO STATUS"

type Handler = Callable[[Success[bytes] | Failure[HTTPFailure]], object]


def parse_request_url(url: str) -> Success[httpx.URL] | Failure[MalformedRequest]:
    """Parse url into an absolute http(s) URL, or MalformedRequest(url)."""
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError):
        parsed = None
    if parsed is None or parsed.scheme not in ("http", "https") or not parsed.host:
        return Failure(MalformedRequest(url))
    return Success(parsed)


def _diagnostic(status: str, description: str) -> str:
    return "\n".join((f"-> {status}", f"-> {description}"))


def evaluate_response(response: httpx.Response) -> Success[bytes] | Failure[HTTPFailure]:
    """Judge a completed response: 2xx is Success(body), anything else RequestFailed."""
    status = response.status_code
    if status in SUCCESS_RANGE:
        return Success(response.content or b"")
    description = response.reason_phrase or httpx.codes.get_reason_phrase(status) or "Unexpected status"
    return Failure(RequestFailed(_diagnostic(f"STATUS {status}", description)))


def _transport_failure(exc: Exception) -> Failure[HTTPFailure]:
    return Failure(RequestFailed(_diagnostic(NO_STATUS, str(exc) or type(exc).__name__)))


def _resolved() -> Future[None]:
    done: Future[None] = Future()
    done.set_result(None)
    return done


class HTTP:
    """HTTP GET client whose results are Outcome[bytes, HTTPFailure].

    Each triggered request is independent: no retries, no deduplication and
    no cancellation. The handler may run on any worker thread, so handlers
    touching shared state must synchronize themselves.

    Attributes:
        _config: Client configuration (timeout, redirects, workers).
        _client: Shared sync httpx client, thread-safe.
        _executor: Runs triggered requests.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
        executor: Executor | None = None,
    ) -> None:
        self._config = config if config is not None else current_config()
        self._client = httpx.Client(transport=transport, **self._client_options())
        self._async_transport = async_transport
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self._config.max_workers,
            thread_name_prefix="fallible-http",
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _client_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {"follow_redirects": self._config.follow_redirects}
        if self._config.timeout is not None:
            options["timeout"] = self._config.timeout
        return options

    def get(self, url: str, handler: Handler) -> Callable[[], Future[None]]:
        """Build a trigger that issues one GET to url per call.

        A malformed url makes the trigger call handler synchronously with
        MalformedRequest(url) and return an already-completed future;
        no I/O happens. Otherwise the request is submitted to the executor
        and handler receives exactly one Outcome on the worker thread.

        Args:
            url: Absolute http or https URL.
            handler: Called once per trigger call with the Outcome.

        Returns:
            Zero-argument trigger. Its future resolves after handler returns
            and carries any exception the handler raised.
        """

        def trigger() -> Future[None]:
            parsed = parse_request_url(url)
            if isinstance(parsed, Failure):
                logger.warning("Malformed request", url=url)
                handler(parsed)
                return _resolved()
            try:
                return self._executor.submit(self._get_and_report, parsed.value, handler)
            except RuntimeError as exc:
                # executor already shut down
                outcome = _transport_failure(exc)
                logger.warning("Request failed", url=url, reason=outcome.error.reason)
                handler(outcome)
                return _resolved()

        return trigger

    def _get_and_report(self, url: httpx.URL, handler: Handler) -> None:
        logger.debug("Issuing request", url=str(url))
        try:
            response = self._client.get(url)
        except Exception as exc:  # noqa: BLE001 - custom transports may raise anything
            outcome = _transport_failure(exc)
        else:
            outcome = evaluate_response(response)
        if isinstance(outcome, Failure):
            logger.warning("Request failed", url=str(url), reason=outcome.error.reason)
        handler(outcome)

    async def fetch(self, url: str) -> Success[bytes] | Failure[HTTPFailure]:
        """Issue one GET to url and return the Outcome.

        Same rules as get(): malformed urls fail without I/O, 2xx is
        Success(body), anything else is RequestFailed.
        """
        parsed = parse_request_url(url)
        if isinstance(parsed, Failure):
            logger.warning("Malformed request", url=url)
            return parsed

        logger.debug("Issuing request", url=str(parsed.value))
        async with httpx.AsyncClient(transport=self._async_transport, **self._client_options()) as client:
            try:
                response = await client.get(parsed.value)
            except Exception as exc:  # noqa: BLE001 - custom transports may raise anything
                return _transport_failure(exc)
        return evaluate_response(response)

    def close(self) -> None:
        """Close the underlying client and, if owned, wait for the executor."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)
        self._client.close()

    def __enter__(self) -> HTTP:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


# -----------------------------------------------------------------------------
# Module-Level Singleton
# -----------------------------------------------------------------------------

_http: HTTP | None = None
_http_lock = threading.Lock()


def _get_http() -> HTTP:
    global _http  # noqa: PLW0603
    if _http is None:
        with _http_lock:
            if _http is None:
                _http = HTTP()
    return _http


def get(url: str, handler: Handler) -> Callable[[], Future[None]]:
    """Build a GET trigger on the shared client. See HTTP.get."""
    return _get_http().get(url, handler)
