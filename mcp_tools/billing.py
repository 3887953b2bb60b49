from mcp_tools.base import DOMAIN, ToolSpec, describe, object_schema
from mcp_tools.params import DomainArgs

TOOLS = [
    ToolSpec(
        name="get_billing",
        description="Get billing information for a domain",
        input_schema=object_schema({"domain": DOMAIN}, required=["domain"]),
        args_type=DomainArgs,
        handler=lambda api, a: api.get_billing(a.domain),
        message=describe(
            lambda a, res: f"Retrieved billing information for domain {a.domain}",
            "Failed to get billing information",
        ),
    ),
]
