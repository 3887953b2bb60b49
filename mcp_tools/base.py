from __future__ import annotations
import copy
import json
from dataclasses import MISSING, dataclass, fields
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData

from netsapiens.api import NetSapiensAPI
from netsapiens.results import ApiResult


class InvalidParamsError(McpError):
    def __init__(self, tool_name: str, missing: Iterable[str]) -> None:
        self.tool_name = tool_name
        self.missing = tuple(missing)
        super().__init__(
            ErrorData(
                code=INVALID_PARAMS,
                message=f"Missing required parameter(s) for {tool_name}: {', '.join(self.missing)}",
            )
        )


class UnknownToolError(McpError):
    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {tool_name}"))


class ToolExecutionError(McpError):
    def __init__(self, tool_name: str, cause: BaseException) -> None:
        self.tool_name = tool_name
        super().__init__(ErrorData(code=INTERNAL_ERROR, message=f"Error executing tool {tool_name}: {cause}"))


# ---- input schema helpers ----

def string_param(description: str) -> Dict[str, Any]:
    return {"type": "string", "description": description}


def number_param(description: str, default: Optional[int] = None) -> Dict[str, Any]:
    p: Dict[str, Any] = {"type": "number", "description": description}
    if default is not None:
        p["default"] = default
    return p


def object_schema(properties: Dict[str, Any], required: Iterable[str] = ()) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "object", "properties": properties}
    required = list(required)
    if required:
        schema["required"] = required
    return schema


DOMAIN = string_param("Domain name")
USER_ID = string_param("User ID")
QUEUE_ID = string_param("Call queue ID")
AGENT_ID = string_param("Agent ID")


# ---- messages ----

Describe = Callable[[Any, ApiResult], str]


def describe(success: Callable[[Any, ApiResult], str], failure: str) -> Describe:
    """Fixed success sentence, or '<failure>: <error>'."""

    def _describe(args: Any, result: ApiResult) -> str:
        if result.success:
            return success(args, result)
        return f"{failure}: {result.error}"

    return _describe


def describe_action(success: str, failure: str) -> Describe:
    """Prefer the gateway's own message, fall back to fixed sentences."""

    def _describe(args: Any, result: ApiResult) -> str:
        return result.message or (success if result.success else failure)

    return _describe


# ---- descriptor ----

def arg_name(field_name: str) -> str:
    head, *rest = field_name.split("_")
    return head + "".join(p.title() for p in rest)


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    input_schema: Dict[str, Any]
    args_type: type
    handler: Callable[[NetSapiensAPI, Any], ApiResult]
    message: Describe

    @property
    def required(self) -> Tuple[str, ...]:
        return tuple(self.input_schema.get("required", ()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }

    def missing(self, arguments: Dict[str, Any]) -> List[str]:
        return [key for key in self.required if not arguments.get(key)]

    def parse(self, arguments: Dict[str, Any]) -> Any:
        """
        Build the typed argument object.
        Raises InvalidParamsError when a required argument is absent or falsy.
        Optional arguments that are absent or None keep their declared defaults.
        """
        missing = self.missing(arguments)
        if missing:
            raise InvalidParamsError(self.name, missing)

        values: Dict[str, Any] = {}
        for f in fields(self.args_type):
            value = arguments.get(arg_name(f.name))
            if value is None and (f.default is not MISSING or f.default_factory is not MISSING):
                continue
            values[f.name] = value
        return self.args_type(**values)


def build_reply(result: ApiResult, message: str) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": result.success, "message": message}
    if result.data is not None:
        body["data"] = result.data
    if result.error is not None:
        body["error"] = result.error
    return {"content": [{"type": "text", "text": json.dumps(body, indent=2)}]}
