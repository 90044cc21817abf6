"""Envelope unwrapping for the two response shapes served by the API.

REST:      {"status": "1" | "0", "message": str, "result": Any}
JSON-RPC:  {"jsonrpc": "2.0", "id": int, "result": Any} or {..., "error": {"code", "message"}}
"""

import logging
from typing import Any

from etherscan_api.exceptions import ProtocolError, RemoteError

logger = logging.getLogger(__name__)


def unwrap(payload: Any, endpoint: str | None = None) -> Any:
    """Return the inner `result` of a successful envelope or raise."""
    if isinstance(payload, dict) and "jsonrpc" in payload:
        return _unwrap_json_rpc(payload, endpoint)
    if isinstance(payload, dict) and "status" in payload:
        return _unwrap_rest(payload, endpoint)
    logger.warning("Unrecognized response envelope from %s: %.200r", endpoint or "unknown endpoint", payload)
    raise ProtocolError(f"{endpoint or 'response'}: neither a REST nor a JSON-RPC envelope")


def _unwrap_json_rpc(payload: dict[str, Any], endpoint: str | None) -> Any:
    if payload["jsonrpc"] != "2.0":
        raise ProtocolError(f"{endpoint or 'response'}: unsupported jsonrpc version {payload['jsonrpc']!r}")

    error = payload.get("error")
    if error is not None:
        if not isinstance(error, dict) or not isinstance(error.get("message"), str):
            raise ProtocolError(f"{endpoint or 'response'}: malformed JSON-RPC error object")
        code = error.get("code")
        raise RemoteError(error["message"], code=code if isinstance(code, int) else None, endpoint=endpoint)

    if "result" not in payload:
        raise ProtocolError(f"{endpoint or 'response'}: JSON-RPC envelope without result or error")
    return payload["result"]


def _unwrap_rest(payload: dict[str, Any], endpoint: str | None) -> Any:
    status = payload["status"]
    result = payload.get("result")
    message = payload.get("message", "")

    if status == "1":
        return result

    if status == "0":
        # "No transactions found" and friends: an empty list is a valid empty result
        if result == []:
            return []
        error_msg = result if isinstance(result, str) and result else message
        raise RemoteError(str(error_msg), endpoint=endpoint)

    raise ProtocolError(f"{endpoint or 'response'}: unexpected status {status!r}")
