"""Pydantic models for the IPv6 calculator."""

from .address import (
    AddressFlags,
    AddressRecord,
    Classification,
    ComplianceNote,
    ErrorKind,
    ParseRequest,
    Scope,
)
from .subnet import (
    BatchRequest,
    BatchResult,
    PlanRequest,
    SubnetPlan,
    SubnetRecord,
    SummarizeRequest,
    SummarizeResponse,
)

__all__ = [
    "AddressFlags",
    "AddressRecord",
    "BatchRequest",
    "BatchResult",
    "Classification",
    "ComplianceNote",
    "ErrorKind",
    "ParseRequest",
    "PlanRequest",
    "Scope",
    "SubnetPlan",
    "SubnetRecord",
    "SummarizeRequest",
    "SummarizeResponse",
]
