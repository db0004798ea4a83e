from .table import ToolTable, build_transmit_payload
from .archive import ArchiveClient
from .outcome import ToolSpec, ToolOutcome
from .calculate import calculate, format_number, evaluate_expression, calculate_operation

__all__ = [
    "ArchiveClient",
    "ToolOutcome",
    "ToolSpec",
    "ToolTable",
    "build_transmit_payload",
    "calculate",
    "calculate_operation",
    "evaluate_expression",
    "format_number",
]
