from mcp_tools.base import ToolSpec, describe, object_schema, string_param
from mcp_tools.params import DomainArgs, NoArgs

TOOLS = [
    ToolSpec(
        name="get_domains",
        description="Get list of domains in the NetSapiens system",
        input_schema=object_schema({}),
        args_type=NoArgs,
        handler=lambda api, a: api.get_domains(),
        message=describe(lambda a, res: f"Retrieved {res.count} domains", "Failed to get domains"),
    ),
    ToolSpec(
        name="get_domain",
        description="Get detailed information about a specific domain",
        input_schema=object_schema(
            {"domain": string_param("Domain name to retrieve information for")},
            required=["domain"],
        ),
        args_type=DomainArgs,
        handler=lambda api, a: api.get_domain(a.domain),
        message=describe(lambda a, res: f"Retrieved domain information for {a.domain}", "Failed to get domain"),
    ),
]
