from mcp_tools.base import DOMAIN, USER_ID, ToolSpec, describe, object_schema, string_param
from mcp_tools.params import AnswerRuleArgs, UserArgs

TOOLS = [
    ToolSpec(
        name="get_user_answer_rules",
        description="Get answer rules for a user",
        input_schema=object_schema({"userId": USER_ID, "domain": DOMAIN}, required=["userId", "domain"]),
        args_type=UserArgs,
        handler=lambda api, a: api.get_user_answer_rules(a.user_id, a.domain),
        message=describe(
            lambda a, res: f"Retrieved {res.count} answer rules for user {a.user_id}@{a.domain}",
            "Failed to get answer rules",
        ),
    ),
    ToolSpec(
        name="get_user_answer_rule",
        description="Get specific answer rule for a user",
        input_schema=object_schema(
            {"userId": USER_ID, "domain": DOMAIN, "timeframe": string_param("Timeframe for the answer rule")},
            required=["userId", "domain", "timeframe"],
        ),
        args_type=AnswerRuleArgs,
        handler=lambda api, a: api.get_user_answer_rule(a.user_id, a.domain, a.timeframe),
        message=describe(
            lambda a, res: f"Retrieved answer rule for {a.user_id}@{a.domain} timeframe {a.timeframe}",
            "Failed to get answer rule",
        ),
    ),
]
