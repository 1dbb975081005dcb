"""Subnet planning and route summarization.

``plan`` splits a base network into equally sized child subnets by writing
the subnet index into the bits between the base and target prefix lengths.
``summarize`` is a greedy, single-pass merge of adjacent prefixes. It does
not check that merged blocks are aligned power-of-two siblings and does not
guarantee a minimal result.
"""

import logging
from collections.abc import Iterable

from ..models.address import AddressRecord
from ..models.subnet import SubnetPlan, SubnetRecord
from .bits import ADDRESS_BITS, Word128, common_prefix_length, write_bits
from .codec import count_hosts, format_prefix, last_address, network_address, parse, to_compressed
from .errors import InvalidPrefixError, InvalidTargetError

logger = logging.getLogger(__name__)

# Upper bound on generated subnets when the caller gives no limit
DEFAULT_MAX_SUBNETS = 4096


def _subnet_record(words: Word128, prefix_length: int) -> SubnetRecord:
    first = network_address(words, prefix_length)
    last = to_compressed(last_address(words, prefix_length))
    return SubnetRecord(
        network=format_prefix(first, prefix_length),
        word128=first,
        prefix_length=prefix_length,
        first_address=to_compressed(first),
        last_address=last,
        broadcast_address=last,
        host_count=count_hosts(prefix_length),
    )


def _parse_base(network: str) -> AddressRecord:
    record = parse(network)
    if not record.valid:
        raise InvalidPrefixError(f"Invalid IPv6 prefix '{record.raw_input}': {record.error_detail}")
    return record


def plan(
    network: str,
    target_prefix_length: int,
    limit: int | None = None,
    *,
    max_subnets: int = DEFAULT_MAX_SUBNETS,
) -> SubnetPlan:
    """Split ``network`` into child subnets of length ``target_prefix_length``.

    Args:
        network: Base network in CIDR notation (e.g., 2001:db8::/32)
        target_prefix_length: Prefix length of the generated subnets
        limit: Maximum number of subnets to generate
        max_subnets: Ceiling applied only when ``limit`` is None

    Returns:
        Plan with ``min(limit, total_possible_subnets)`` subnets in index order

    Raises:
        InvalidPrefixError: If ``network`` is not a valid IPv6 prefix
        InvalidTargetError: If the target is not longer than the base or exceeds 128
        ValueError: If ``limit`` is negative
    """
    base = _parse_base(network)
    base_prefix_length = base.prefix_length

    if target_prefix_length > ADDRESS_BITS:
        raise InvalidTargetError(f"Target prefix length {target_prefix_length} cannot exceed {ADDRESS_BITS}")
    if target_prefix_length <= base_prefix_length:
        raise InvalidTargetError(
            f"Target prefix length {target_prefix_length} must be longer than /{base_prefix_length}"
        )
    if limit is not None and limit < 0:
        raise ValueError(f"Subnet limit must be non-negative, got {limit}")

    subnet_bits = target_prefix_length - base_prefix_length
    total_possible = 1 << subnet_bits
    if limit is None:
        count = min(total_possible, max_subnets)
    else:
        count = min(limit, total_possible)

    base_words = network_address(base.word128, base_prefix_length)
    logger.debug(
        "Generating subnet plan",
        extra={
            "base": format_prefix(base_words, base_prefix_length),
            "target_prefix_length": target_prefix_length,
            "count": count,
        },
    )

    subnets = tuple(
        _subnet_record(write_bits(base_words, base_prefix_length, subnet_bits, index), target_prefix_length)
        for index in range(count)
    )

    return SubnetPlan(
        original_prefix=base.raw_input,
        base_network=format_prefix(base_words, base_prefix_length),
        base_prefix_length=base_prefix_length,
        target_prefix_length=target_prefix_length,
        subnet_bits=subnet_bits,
        subnets=subnets,
        total_possible_subnets=total_possible,
    )


def summarize(prefixes: Iterable[str]) -> list[str]:
    """Greedily merge adjacent prefixes, left to right.

    Invalid entries are dropped. Entries are sorted by their expanded form and
    each pair whose common leading bits reach ``min(len_a, len_b) - 1`` is
    merged into one prefix of that common length.

    Returns:
        Summarized prefixes in CIDR notation
    """
    records = []
    for prefix in prefixes:
        record = parse(prefix)
        if record.valid:
            records.append(record)
        else:
            logger.debug("Dropping invalid prefix from summary", extra={"prefix": record.raw_input})

    if not records:
        return []

    records.sort(key=lambda record: record.expanded)

    summarized: list[str] = []
    current_words = records[0].word128
    current_length = records[0].prefix_length

    for record in records[1:]:
        common = common_prefix_length(current_words, record.word128)
        shortest = min(current_length, record.prefix_length)

        if common >= shortest - 1:
            current_length = max(0, min(common, shortest - 1))
            current_words = network_address(current_words, current_length)
        else:
            summarized.append(format_prefix(network_address(current_words, current_length), current_length))
            current_words = record.word128
            current_length = record.prefix_length

    summarized.append(format_prefix(network_address(current_words, current_length), current_length))
    return summarized
