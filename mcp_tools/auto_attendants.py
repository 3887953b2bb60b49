from mcp_tools.base import DOMAIN, ToolSpec, describe, object_schema
from mcp_tools.params import DomainArgs

TOOLS = [
    ToolSpec(
        name="get_auto_attendants",
        description="Get auto attendants for a domain",
        input_schema=object_schema({"domain": DOMAIN}, required=["domain"]),
        args_type=DomainArgs,
        handler=lambda api, a: api.get_auto_attendants(a.domain),
        message=describe(
            lambda a, res: f"Retrieved {res.count} auto attendants for domain {a.domain}",
            "Failed to get auto attendants",
        ),
    ),
]
