from mcp_tools.base import DOMAIN, USER_ID, ToolSpec, describe, object_schema
from mcp_tools.params import UserArgs

_USER_SCHEMA = object_schema({"userId": USER_ID, "domain": DOMAIN}, required=["userId", "domain"])

TOOLS = [
    ToolSpec(
        name="get_user_greetings",
        description="Get greetings for a user",
        input_schema=_USER_SCHEMA,
        args_type=UserArgs,
        handler=lambda api, a: api.get_user_greetings(a.user_id, a.domain),
        message=describe(
            lambda a, res: f"Retrieved {res.count} greetings for user {a.user_id}@{a.domain}",
            "Failed to get user greetings",
        ),
    ),
    ToolSpec(
        name="get_user_voicemails",
        description="Get voicemails for a user",
        input_schema=_USER_SCHEMA,
        args_type=UserArgs,
        handler=lambda api, a: api.get_user_voicemails(a.user_id, a.domain),
        message=describe(
            lambda a, res: f"Retrieved {res.count} voicemails for user {a.user_id}@{a.domain}",
            "Failed to get user voicemails",
        ),
    ),
]
