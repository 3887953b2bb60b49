from mcp_tools.base import ToolSpec, describe, number_param, object_schema, string_param
from mcp_tools.params import CdrArgs
from netsapiens.api import DEFAULT_CDR_LIMIT

TOOLS = [
    ToolSpec(
        name="get_cdr_records",
        description="Retrieve call detail records (CDR)",
        input_schema=object_schema(
            {
                "startDate": string_param("Start date for CDR search (YYYY-MM-DD format)"),
                "endDate": string_param("End date for CDR search (YYYY-MM-DD format)"),
                "user": string_param("Specific user to get CDR records for"),
                "domain": string_param("Domain to search in (required if user is specified)"),
                "limit": number_param(
                    f"Maximum number of records to return (default: {DEFAULT_CDR_LIMIT})",
                    default=DEFAULT_CDR_LIMIT,
                ),
            }
        ),
        args_type=CdrArgs,
        handler=lambda api, a: api.get_cdr_records(
            start_date=a.start_date,
            end_date=a.end_date,
            user=a.user,
            domain=a.domain,
            limit=a.limit,
        ),
        message=describe(lambda a, res: f"Retrieved {res.count} CDR records", "Failed to get CDR records"),
    ),
]
