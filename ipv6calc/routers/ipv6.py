"""IPv6 address endpoints.

Thin HTTP adapters over the engine: parsing, subnet planning, route
summarization and batch parsing.
"""

import logging

from fastapi import APIRouter, HTTPException

from ..config import get_allocation_prefix_length, get_max_batch_addresses, get_max_subnets
from ..engine import PlannerError, batch_export_rows, parse, plan, process_batch, split_batch_text, summarize
from ..models import (
    AddressRecord,
    BatchRequest,
    BatchResult,
    ParseRequest,
    PlanRequest,
    SubnetPlan,
    SummarizeRequest,
    SummarizeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/ipv6", tags=["ipv6"])


def _batch_entries(request: BatchRequest) -> list[str]:
    entries = [address.strip() for address in request.addresses if address.strip()]
    if request.text:
        entries.extend(split_batch_text(request.text))

    max_entries = get_max_batch_addresses()
    if len(entries) > max_entries:
        raise HTTPException(
            status_code=400,
            detail=f"Batch of {len(entries)} addresses exceeds the limit of {max_entries}",
        )
    return entries


@router.post("/parse", response_model=AddressRecord)
async def parse_address(request: ParseRequest):
    """Parse an IPv6 address or prefix.

    Invalid input is not an HTTP error: the record comes back with
    ``valid=false`` and the error kind and detail filled in.

    Args:
        request: Parse request with address

    Returns:
        Parsed address record
    """
    return parse(request.address, allocation_prefix_length=get_allocation_prefix_length())


@router.post("/plan", response_model=SubnetPlan)
async def plan_subnets(request: PlanRequest):
    """Split a network into child subnets of a longer prefix length.

    Args:
        request: Plan request with base network, target prefix length and optional limit

    Returns:
        Subnet plan in increasing network order

    Raises:
        HTTPException: 400 if the network or target is invalid, or the limit exceeds PLAN_MAX_SUBNETS
    """
    max_subnets = get_max_subnets()
    if request.limit is not None and request.limit > max_subnets:
        raise HTTPException(
            status_code=400,
            detail={"error": "LimitExceeded", "message": f"Limit {request.limit} exceeds maximum of {max_subnets}"},
        )

    try:
        result = plan(request.network, request.target_prefix_length, request.limit, max_subnets=max_subnets)
    except PlannerError as e:
        logger.info(
            "Subnet plan rejected",
            extra={"network": request.network, "error": e.kind.value},
        )
        raise HTTPException(status_code=400, detail={"error": e.kind.value, "message": e.message})

    return result


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize_routes(request: SummarizeRequest):
    """Merge adjacent prefixes into shorter ones (best effort, single pass).

    Invalid prefixes are ignored.
    """
    return SummarizeResponse(prefixes=request.prefixes, summarized=summarize(request.prefixes))


@router.post("/batch", response_model=BatchResult)
async def parse_batch(request: BatchRequest):
    """Parse many addresses at once and count the results.

    Raises:
        HTTPException: 400 if the batch exceeds BATCH_MAX_ADDRESSES
    """
    entries = _batch_entries(request)
    return process_batch(entries, allocation_prefix_length=get_allocation_prefix_length())


@router.post("/batch/export")
async def export_batch(request: BatchRequest):
    """Parse many addresses and return flat summary rows for download."""
    entries = _batch_entries(request)
    result = process_batch(entries, allocation_prefix_length=get_allocation_prefix_length())
    return batch_export_rows(result.results)
