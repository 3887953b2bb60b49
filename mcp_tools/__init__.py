from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

from mcp.shared.exceptions import McpError

from netsapiens.api import NetSapiensAPI
from netsapiens.log import get_logger

from .base import InvalidParamsError, ToolExecutionError, ToolSpec, UnknownToolError, build_reply
from .loader import load_tools

logger = get_logger(__name__)

CATALOG: Tuple[ToolSpec, ...] = load_tools()


class Dispatcher:
    """
    Routes (tool name, arguments) to one NetSapiensAPI call and wraps the result.

    Bad input and unknown names raise McpError subclasses before any HTTP call.
    Remote failures come back as a normal reply with success=false.
    """

    def __init__(self, api: NetSapiensAPI, catalog: Tuple[ToolSpec, ...] = CATALOG) -> None:
        self.api = api
        self.catalog = catalog
        self._by_name = {spec.name: spec for spec in catalog}

    def list_tools(self) -> List[Dict[str, Any]]:
        return [spec.to_dict() for spec in self.catalog]

    def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if arguments is None:
            arguments = {}

        spec = self._by_name.get(name)
        if spec is None:
            raise UnknownToolError(name)

        args = spec.parse(arguments)

        try:
            result = spec.handler(self.api, args)
            reply = build_reply(result, spec.message(args, result))
        except McpError:
            raise
        except Exception as e:
            logger.exception("Tool execution crashed", extra={"tool": name})
            raise ToolExecutionError(name, e) from e

        logger.debug("Tool call finished", extra={"tool": name, "success": result.success})
        return reply


__all__ = [
    "CATALOG",
    "Dispatcher",
    "InvalidParamsError",
    "ToolSpec",
    "UnknownToolError",
]
