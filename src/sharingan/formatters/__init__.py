"""Output formatters for Sharingan."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter, architecture_to_dict, write_json
from .rich_formatter import RichFormatter
from .summary import build_summary


def get_formatter(name: str) -> BaseFormatter:
    """Get a terminal formatter instance by name.

    Args:
        name: One of "rich", "json"

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "rich": RichFormatter,
        "json": JsonFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "RichFormatter",
    "architecture_to_dict",
    "build_summary",
    "get_formatter",
    "write_json",
]
