from mcp_tools.base import ToolSpec, describe_action, object_schema
from mcp_tools.params import NoArgs

TOOLS = [
    ToolSpec(
        name="test_connection",
        description="Test connectivity to NetSapiens API",
        input_schema=object_schema({}),
        args_type=NoArgs,
        handler=lambda api, a: api.test_connection(),
        message=describe_action("Connection successful", "Connection failed"),
    ),
]
