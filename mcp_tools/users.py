from mcp_tools.base import DOMAIN, ToolSpec, describe, number_param, object_schema, string_param
from mcp_tools.params import SearchUsersArgs, UserArgs
from netsapiens.api import DEFAULT_SEARCH_LIMIT


def _found(a: SearchUsersArgs, res) -> str:
    scope = f" in domain {a.domain}" if a.domain else ""
    return f'Found {res.count} users matching "{a.query}"{scope}'


TOOLS = [
    ToolSpec(
        name="search_users",
        description="Search for users in the NetSapiens system",
        input_schema=object_schema(
            {
                "query": string_param("Search query (username or partial username)"),
                "domain": string_param("Optional specific domain to search in"),
                "limit": number_param(
                    f"Maximum number of results to return (default: {DEFAULT_SEARCH_LIMIT})",
                    default=DEFAULT_SEARCH_LIMIT,
                ),
            },
            required=["query"],
        ),
        args_type=SearchUsersArgs,
        handler=lambda api, a: api.search_users(a.query, a.domain, a.limit),
        message=describe(_found, "Search failed"),
    ),
    ToolSpec(
        name="get_user",
        description="Get detailed information about a specific user",
        input_schema=object_schema(
            {"userId": string_param("User ID (username part)"), "domain": DOMAIN},
            required=["userId", "domain"],
        ),
        args_type=UserArgs,
        handler=lambda api, a: api.get_user(a.user_id, a.domain),
        message=describe(lambda a, res: f"Retrieved user details for {a.user_id}", "Failed to get user"),
    ),
]
