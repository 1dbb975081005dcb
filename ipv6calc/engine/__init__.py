"""IPv6 address engine: codec, classification and subnet planner.

Every operation is a pure function of its input and returns an immutable
record, so the engine can be shared freely between concurrent callers.
"""

from .batch import batch_export_rows, process_batch, split_batch_text
from .codec import count_allocation_subnets, count_hosts, parse
from .errors import AddressParseError, InvalidPrefixError, InvalidTargetError, PlannerError
from .planner import DEFAULT_MAX_SUBNETS, plan, summarize

__all__ = [
    "DEFAULT_MAX_SUBNETS",
    "AddressParseError",
    "InvalidPrefixError",
    "InvalidTargetError",
    "PlannerError",
    "batch_export_rows",
    "count_allocation_subnets",
    "count_hosts",
    "parse",
    "plan",
    "process_batch",
    "split_batch_text",
    "summarize",
]
