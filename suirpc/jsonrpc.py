"""A JSON-RPC 2.0 client over HTTP POST."""

from __future__ import annotations

import base64
import enum
import itertools
import json
import threading
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Union

import requests
from requests.adapters import HTTPAdapter

from .methods import RpcMethod

JSONRPC_VERSION = "2.0"
DEFAULT_TIMEOUT = 30.0


class JsonRpcError(Exception):
    """An error object returned by the server."""

    def __init__(self, code: int, message: str = "", data: Any = None) -> None:
        self.code = code
        self.message = message
        self.data = data
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.message:
            return f"json-rpc error {self.code}"
        return self.message


class HTTPError(Exception):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, status: str, body: bytes = b"") -> None:
        self.status_code = status_code
        self.status = status
        self.body = body
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.body:
            return self.status
        return f"{self.status}: {self.body.decode('utf-8', 'replace')}"


class NoResultError(Exception):
    """A response carried neither an error nor a result."""

    def __init__(self) -> None:
        super().__init__("no result in JSON-RPC response")


@dataclass
class BatchElem:
    """One request of a batch; ``result`` and ``error`` are filled in by the call.

    ``decoder``, when given, turns the raw JSON result into ``result``; if it
    raises, the exception is stored in ``error``.
    """

    method: Union[RpcMethod, str]
    args: Optional[list[Any]] = None
    decoder: Optional[Callable[[Any], Any]] = None
    result: Any = None
    error: Optional[Exception] = None


def _json_default(obj: Any) -> Any:
    to_json = getattr(obj, "to_json", None)
    if callable(to_json):
        return to_json()
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(obj).decode("ascii")
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")


def _dumps(obj: Any) -> str:
    return json.dumps(obj, default=_json_default, separators=(",", ":"))


def _error_from(obj: dict[str, Any]) -> Optional[JsonRpcError]:
    err = obj.get("error")
    if err is None:
        return None
    return JsonRpcError(err.get("code", 0), err.get("message", ""), err.get("data"))


class Client:
    """Sends JSON-RPC requests to one endpoint."""

    def __init__(
        self,
        rpc_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.rpc_url = rpc_url.rstrip("/")
        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(pool_maxsize=3)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session
        self.timeout = timeout
        self._ids = itertools.count(1)
        self._id_lock = threading.Lock()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _next_id(self) -> int:
        with self._id_lock:
            return next(self._ids)

    def _new_message(self, method: Union[RpcMethod, str], args: Optional[Iterable[Any]]) -> dict[str, Any]:
        msg: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "id": self._next_id(), "method": str(method)}
        if args is not None:
            msg["params"] = list(args)
        return msg

    def _post(self, payload: Any) -> Any:
        body = _dumps(payload).encode("utf-8")
        resp = self.session.post(
            self.rpc_url,
            data=body,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        if not 200 <= resp.status_code < 300:
            raise HTTPError(resp.status_code, f"{resp.status_code} {resp.reason or ''}".rstrip(), resp.content)
        return json.loads(resp.content)

    def call(self, method: Union[RpcMethod, str], *args: Any) -> Any:
        """Call ``method`` with positional ``args`` and return the decoded result."""
        msg = self._new_message(method, args if args else None)
        response = self._post(msg)
        if not isinstance(response, dict):
            raise ValueError("JSON-RPC response is not an object")
        error = _error_from(response)
        if error is not None:
            raise error
        if "result" not in response:
            raise NoResultError()
        return response["result"]

    def batch_call(self, elems: list[BatchElem]) -> None:
        """Send all requests in one batch and fill in each element's result or error."""
        messages = [self._new_message(e.method, e.args) for e in elems]
        responses = self._post(messages)
        if not isinstance(responses, list):
            raise ValueError("JSON-RPC batch response is not an array")
        for elem, resp in zip(elems, responses):
            error = _error_from(resp)
            if error is not None:
                elem.error = error
                continue
            if "result" not in resp:
                elem.error = NoResultError()
                continue
            try:
                raw = resp["result"]
                elem.result = raw if elem.decoder is None else elem.decoder(raw)
                elem.error = None
            except Exception as exc:  # decoder failures belong to the element
                elem.error = exc


def dial(rpc_url: str) -> Client:
    """Create a client for ``rpc_url`` with default settings."""
    return Client(rpc_url)