from mcp_tools.base import DOMAIN, ToolSpec, describe, object_schema, string_param
from mcp_tools.params import AgentStatisticsArgs


def _retrieved(a: AgentStatisticsArgs, res) -> str:
    agent = f" (agent: {a.agent_id})" if a.agent_id else ""
    return f"Retrieved agent statistics for domain {a.domain}{agent}"


TOOLS = [
    ToolSpec(
        name="get_agent_statistics",
        description="Get agent statistics for a domain",
        input_schema=object_schema(
            {"domain": DOMAIN, "agentId": string_param("Optional specific agent ID")},
            required=["domain"],
        ),
        args_type=AgentStatisticsArgs,
        handler=lambda api, a: api.get_agent_statistics(a.domain, a.agent_id),
        message=describe(_retrieved, "Failed to get agent statistics"),
    ),
]
