from mcp_tools.base import DOMAIN, ToolSpec, describe, object_schema
from mcp_tools.params import DomainArgs

TOOLS = [
    ToolSpec(
        name="get_music_on_hold",
        description="Get music on hold files for a domain",
        input_schema=object_schema({"domain": DOMAIN}, required=["domain"]),
        args_type=DomainArgs,
        handler=lambda api, a: api.get_music_on_hold(a.domain),
        message=describe(
            lambda a, res: f"Retrieved {res.count} music on hold files for domain {a.domain}",
            "Failed to get music on hold",
        ),
    ),
]
