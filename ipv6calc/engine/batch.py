"""Batch parsing with aggregate counts."""

from collections import Counter
from collections.abc import Iterable

from ..models.address import AddressRecord
from ..models.subnet import BatchResult
from .codec import DEFAULT_ALLOCATION_PREFIX_LENGTH, parse


def split_batch_text(text: str) -> list[str]:
    """Split a newline-separated block into stripped, non-blank entries."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def process_batch(
    lines: Iterable[str], *, allocation_prefix_length: int = DEFAULT_ALLOCATION_PREFIX_LENGTH
) -> BatchResult:
    """Parse each non-blank entry in order and count the outcomes."""
    results = tuple(
        parse(line, allocation_prefix_length=allocation_prefix_length) for line in lines if line.strip()
    )
    valid = [record for record in results if record.valid]
    counts = Counter(record.classification.value for record in valid)

    return BatchResult(
        results=results,
        valid_count=len(valid),
        invalid_count=len(results) - len(valid),
        classification_counts=dict(counts),
    )


def batch_export_rows(results: Iterable[AddressRecord]) -> list[dict]:
    """Summary rows for exporting batch results."""
    return [
        {
            "input": record.raw_input,
            "valid": record.valid,
            "classification": record.classification.value if record.classification else None,
            "scope": record.scope.value if record.scope else None,
            "expanded": record.expanded,
            "compressed": record.compressed,
            "network": record.network,
            "error": record.error_detail,
        }
        for record in results
    ]
