from mcp_tools.base import AGENT_ID, DOMAIN, QUEUE_ID, ToolSpec, describe, describe_action, object_schema
from mcp_tools.params import DomainArgs, QueueAgentArgs

_AGENT_SCHEMA = object_schema(
    {"domain": DOMAIN, "queueId": QUEUE_ID, "agentId": AGENT_ID},
    required=["domain", "queueId", "agentId"],
)

TOOLS = [
    ToolSpec(
        name="get_agents",
        description="Get agents for a domain",
        input_schema=object_schema({"domain": DOMAIN}, required=["domain"]),
        args_type=DomainArgs,
        handler=lambda api, a: api.get_agents(a.domain),
        message=describe(lambda a, res: f"Retrieved {res.count} agents for domain {a.domain}", "Failed to get agents"),
    ),
    ToolSpec(
        name="login_agent",
        description="Login an agent to a call queue",
        input_schema=_AGENT_SCHEMA,
        args_type=QueueAgentArgs,
        handler=lambda api, a: api.login_agent(a.domain, a.queue_id, a.agent_id),
        message=describe_action("Agent logged in successfully", "Failed to login agent"),
    ),
    ToolSpec(
        name="logout_agent",
        description="Logout an agent from a call queue",
        input_schema=_AGENT_SCHEMA,
        args_type=QueueAgentArgs,
        handler=lambda api, a: api.logout_agent(a.domain, a.queue_id, a.agent_id),
        message=describe_action("Agent logged out successfully", "Failed to logout agent"),
    ),
]
