"""Outcomes of a router call, echoing the request id and method.

They carry what is needed to build a JSON-RPC response, plus the method
name for tracing; they are not the response objects themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import RouterError
from .rpc_id import RpcId

__all__ = ["CallSuccess", "CallError"]


@dataclass
class CallSuccess:
    """A successful call: the request id, the method and the JSON result."""

    id: RpcId
    method: str
    value: Any


class CallError(Exception):
    """A failed call: the request id, the method and the router error."""

    def __init__(self, id: RpcId, method: str, error: RouterError) -> None:
        super().__init__(id, method, error)
        self.id = id
        self.method = method
        self.error = error

    def __str__(self) -> str:
        return f"CallError {{ id: {self.id}, method: {self.method!r}, error: {self.error} }}"

    def __repr__(self) -> str:
        return str(self)