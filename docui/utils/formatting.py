"""Text rendering of domain objects for the detail panel."""

import dataclasses
import json
from typing import Any


def _to_plain(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {k: _to_plain(v) for k, v in dataclasses.asdict(obj).items()}
    if isinstance(obj, dict):
        return {str(k): _to_plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [_to_plain(v) for v in obj]
    return obj


def render(obj: Any) -> str:
    """Render a dataclass, dict or list as indented JSON.

    Values json cannot encode are rendered with str().
    """
    if obj is None:
        return ""
    if isinstance(obj, str):
        return obj
    return json.dumps(_to_plain(obj), indent=2, default=str, ensure_ascii=False)


def truncate(text: str, width: int) -> str:
    """Truncate text to width, marking the cut with '…'."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return "…"
    return text[: width - 1] + "…"
