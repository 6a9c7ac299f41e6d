"""Client operations that input forms are submitted to."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple


@dataclass(frozen=True)
class Command:
    """A client operation an input form can be submitted to.

    Attributes:
        command_id: Name forms refer to
        func: Receives the merged form parameters
        refresh: Panels to refresh after it succeeds
        success: Message shown on success; formatted with the parameters
        progress: Message shown while a background command runs; formatted
            the same way
        background: Run through the context's runner instead of inline
    """

    command_id: str
    func: Callable[[Dict[str, Any]], Any]
    refresh: Tuple[str, ...] = ()
    success: str = ""
    background: bool = False
    progress: str = ""
