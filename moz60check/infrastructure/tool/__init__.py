from moz60check.infrastructure.tool.moz60tool_runner import (
    MOZ60TOOL_URL,
    Moz60ToolRunner,
    find_sources,
)

__all__ = ["MOZ60TOOL_URL", "Moz60ToolRunner", "find_sources"]
