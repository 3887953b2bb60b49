from mcp_tools.base import DOMAIN, ToolSpec, describe, number_param, object_schema, string_param
from mcp_tools.params import PhoneNumberArgs, PhoneNumbersArgs

TOOLS = [
    ToolSpec(
        name="get_phone_numbers",
        description="Get phone numbers for a domain",
        input_schema=object_schema(
            {"domain": DOMAIN, "limit": number_param("Maximum number of results (optional)")},
            required=["domain"],
        ),
        args_type=PhoneNumbersArgs,
        handler=lambda api, a: api.get_phone_numbers(a.domain, a.limit),
        message=describe(
            lambda a, res: f"Retrieved {res.count} phone numbers for domain {a.domain}",
            "Failed to get phone numbers",
        ),
    ),
    ToolSpec(
        name="get_phone_number",
        description="Get details of a specific phone number",
        input_schema=object_schema(
            {"domain": DOMAIN, "phoneNumber": string_param("Phone number to lookup")},
            required=["domain", "phoneNumber"],
        ),
        args_type=PhoneNumberArgs,
        handler=lambda api, a: api.get_phone_number(a.domain, a.phone_number),
        message=describe(
            lambda a, res: f"Retrieved phone number details for {a.phone_number}",
            "Failed to get phone number",
        ),
    ),
]
