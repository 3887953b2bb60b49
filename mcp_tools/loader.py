import importlib

# Catalog order.
TOOL_MODULES = (
    "users",
    "cdrs",
    "domains",
    "devices",
    "phone_numbers",
    "call_queues",
    "agents",
    "auto_attendants",
    "answer_rules",
    "voicemail",
    "music_on_hold",
    "billing",
    "statistics",
    "connection",
)


def load_tools():
    """
    Import the tool modules in catalog order.
    Each tool module must expose:
      - TOOLS (list[ToolSpec])
    Returns the specs as a tuple; duplicate names are a programming error.
    """
    package_name = __name__.rsplit(".", 1)[0]  # "mcp_tools"

    specs = []
    seen = set()
    for name in TOOL_MODULES:
        m = importlib.import_module(f"{package_name}.{name}")
        for spec in getattr(m, "TOOLS", ()):
            if spec.name in seen:
                raise RuntimeError(f"Duplicate tool name: {spec.name} ({package_name}.{name})")
            seen.add(spec.name)
            specs.append(spec)

    return tuple(specs)
