from mcp_tools.base import DOMAIN, USER_ID, ToolSpec, describe, object_schema
from mcp_tools.params import UserArgs

TOOLS = [
    ToolSpec(
        name="get_user_devices",
        description="Get devices assigned to a specific user",
        input_schema=object_schema({"userId": USER_ID, "domain": DOMAIN}, required=["userId", "domain"]),
        args_type=UserArgs,
        handler=lambda api, a: api.get_user_devices(a.user_id, a.domain),
        message=describe(
            lambda a, res: f"Retrieved {res.count} devices for user {a.user_id}@{a.domain}",
            "Failed to get user devices",
        ),
    ),
]
