from mcp_tools.base import DOMAIN, QUEUE_ID, ToolSpec, describe, object_schema
from mcp_tools.params import DomainArgs, QueueArgs

_QUEUE_SCHEMA = object_schema({"domain": DOMAIN, "queueId": QUEUE_ID}, required=["domain", "queueId"])

TOOLS = [
    ToolSpec(
        name="get_call_queues",
        description="Get call queues for a domain",
        input_schema=object_schema({"domain": DOMAIN}, required=["domain"]),
        args_type=DomainArgs,
        handler=lambda api, a: api.get_call_queues(a.domain),
        message=describe(
            lambda a, res: f"Retrieved {res.count} call queues for domain {a.domain}",
            "Failed to get call queues",
        ),
    ),
    ToolSpec(
        name="get_call_queue",
        description="Get details of a specific call queue",
        input_schema=_QUEUE_SCHEMA,
        args_type=QueueArgs,
        handler=lambda api, a: api.get_call_queue(a.domain, a.queue_id),
        message=describe(lambda a, res: f"Retrieved call queue details for {a.queue_id}", "Failed to get call queue"),
    ),
    ToolSpec(
        name="get_call_queue_agents",
        description="Get agents assigned to a call queue",
        input_schema=_QUEUE_SCHEMA,
        args_type=QueueArgs,
        handler=lambda api, a: api.get_call_queue_agents(a.domain, a.queue_id),
        message=describe(
            lambda a, res: f"Retrieved {res.count} agents for call queue {a.queue_id}",
            "Failed to get call queue agents",
        ),
    ),
]
