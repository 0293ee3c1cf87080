from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DiagnosticLevel(Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal note about the graph, returned next to the compiled text."""
    level: DiagnosticLevel
    message: str
    node_id: Optional[int] = None

    def __str__(self):
        where = f" (node {self.node_id})" if self.node_id is not None else ""
        return f"[{self.level.value}] {self.message}{where}"
