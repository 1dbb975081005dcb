"""IPv6 address codec.

Parses textual IPv6 address/prefix notation into a Word128 plus prefix
length, and renders a Word128 back into every supported textual and binary
form (expanded, RFC 5952 compressed, binary, hex, integer, base64 and
reverse DNS). ``parse`` never raises: failures are reported inside the
returned ``AddressRecord``.
"""

import base64
import logging
import re

from ..models.address import AddressRecord, ErrorKind
from .bits import ADDRESS_BITS, WORD_COUNT, ZERO, Word128, mask_bits, to_bytes, to_int
from .classify import classify, get_compliance_notes, get_flags, get_scope
from .errors import AddressParseError

logger = logging.getLogger(__name__)

DEFAULT_PREFIX_LENGTH = ADDRESS_BITS
DEFAULT_ALLOCATION_PREFIX_LENGTH = 48

# Host parts this wide are shown as 2^k as well as in full
EXPONENT_NOTATION_MIN_BITS = 64

_HEXTET_RE = re.compile(r"[0-9a-fA-F]{1,4}")
_PREFIX_RE = re.compile(r"[0-9]{1,3}")
_IPV4_MAPPED_PREFIX = "::ffff:"
_DOTTED_QUAD_RE = re.compile(r"([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})")


# Parsing


def _split_prefix(text: str) -> tuple[str, int]:
    """Split ``addr/len`` into body and prefix length."""
    if "/" not in text:
        return text, DEFAULT_PREFIX_LENGTH

    body, _, suffix = text.partition("/")
    if not _PREFIX_RE.fullmatch(suffix):
        raise AddressParseError(ErrorKind.INVALID_PREFIX, f"Invalid prefix length '{suffix}'")

    prefix_length = int(suffix)
    if prefix_length > ADDRESS_BITS:
        raise AddressParseError(
            ErrorKind.INVALID_PREFIX,
            f"Prefix length {prefix_length} out of range 0-{ADDRESS_BITS}",
        )
    return body, prefix_length


def _parse_ipv4_mapped(dotted: str) -> Word128:
    match = _DOTTED_QUAD_RE.fullmatch(dotted)
    if not match:
        raise AddressParseError(ErrorKind.INVALID_IPV4_EMBED, f"Invalid embedded IPv4 address '{dotted}'")

    octets = [int(octet) for octet in match.groups()]
    if any(octet > 255 for octet in octets):
        raise AddressParseError(
            ErrorKind.INVALID_IPV4_EMBED,
            f"Embedded IPv4 octet out of range 0-255 in '{dotted}'",
        )

    return (0, 0, 0, 0, 0, 0xFFFF, (octets[0] << 8) | octets[1], (octets[2] << 8) | octets[3])


def _parse_hextets(groups: list[str]) -> list[int]:
    words = []
    for group in groups:
        if not _HEXTET_RE.fullmatch(group):
            raise AddressParseError(ErrorKind.INVALID_HEXTET, f"Invalid hextet '{group}'")
        words.append(int(group, 16))
    return words


def _parse_body(body: str) -> Word128:
    if body == "::":
        return ZERO

    if body.lower().startswith(_IPV4_MAPPED_PREFIX) and "." in body:
        return _parse_ipv4_mapped(body[len(_IPV4_MAPPED_PREFIX) :])

    parts = body.split("::")
    if len(parts) > 2:
        raise AddressParseError(
            ErrorKind.MULTIPLE_COMPRESSION_MARKERS,
            "Multiple '::' compression markers are not allowed",
        )

    if len(parts) == 2:
        left = _parse_hextets(parts[0].split(":") if parts[0] else [])
        right = _parse_hextets(parts[1].split(":") if parts[1] else [])
        zeros_needed = WORD_COUNT - (len(left) + len(right))
        if zeros_needed < 0:
            raise AddressParseError(
                ErrorKind.INVALID_LENGTH,
                f"Too many hextets ({len(left) + len(right)}) around '::'",
            )
        words = left + [0] * zeros_needed + right
    else:
        groups = body.split(":")
        if len(groups) != WORD_COUNT:
            raise AddressParseError(
                ErrorKind.INVALID_LENGTH,
                f"Expected {WORD_COUNT} hextets, got {len(groups)}",
            )
        words = _parse_hextets(groups)

    return tuple(words)


def parse_words(text: str) -> tuple[Word128, int]:
    """Parse ``text`` into (words, prefix_length).

    Raises:
        AddressParseError: If the text is not a valid IPv6 address or prefix
    """
    body, prefix_length = _split_prefix(text.strip())
    return _parse_body(body), prefix_length


# Rendering


def to_expanded(words: Word128) -> str:
    """Each word as 4 lowercase hex digits, colon-joined."""
    return ":".join(f"{word:04x}" for word in words)


def _longest_zero_run(words: Word128) -> tuple[int, int]:
    """Return (start, length) of the longest run of zero words, leftmost on ties."""
    best_start, best_length = -1, 0
    run_start = -1

    for index, word in enumerate((*words, 1)):
        if word == 0:
            if run_start == -1:
                run_start = index
            continue
        if run_start != -1:
            if index - run_start > best_length:
                best_start, best_length = run_start, index - run_start
            run_start = -1

    return best_start, best_length


def to_compressed(words: Word128) -> str:
    """RFC 5952 canonical text form."""
    start, length = _longest_zero_run(words)
    if length < 2:
        return ":".join(f"{word:x}" for word in words)

    head = ":".join(f"{word:x}" for word in words[:start])
    tail = ":".join(f"{word:x}" for word in words[start + length :])
    return f"{head}::{tail}"


def to_binary(words: Word128) -> str:
    return " ".join(f"{word:016b}" for word in words)


def to_hex(words: Word128) -> str:
    return "0x" + "".join(f"{word:04x}" for word in words)


def to_integer(words: Word128) -> str:
    return str(to_int(words))


def to_base64(words: Word128) -> str:
    return base64.b64encode(to_bytes(words)).decode("ascii")


def to_reverse_dns(words: Word128) -> str:
    """Nibble-reversed ip6.arpa name."""
    nibbles = "".join(f"{word:04x}" for word in words)
    return ".".join(reversed(nibbles)) + ".ip6.arpa"


# Network and range derivation


def network_address(words: Word128, prefix_length: int) -> Word128:
    """Clear every bit after the prefix."""
    return mask_bits(words, prefix_length)


def last_address(words: Word128, prefix_length: int) -> Word128:
    """Set every bit after the prefix."""
    return mask_bits(words, prefix_length, fill=True)


def format_prefix(words: Word128, prefix_length: int) -> str:
    return f"{to_compressed(words)}/{prefix_length}"


def count_hosts(prefix_length: int) -> str:
    """Number of addresses in a /prefix_length as an exact string.

    Host parts of 64 bits or more are written as ``2^k (decimal)``.
    """
    host_bits = ADDRESS_BITS - prefix_length
    total = 1 << host_bits
    if host_bits >= EXPONENT_NOTATION_MIN_BITS:
        return f"2^{host_bits} ({total})"
    return str(total)


def count_allocation_subnets(
    prefix_length: int, allocation_prefix_length: int = DEFAULT_ALLOCATION_PREFIX_LENGTH
) -> str | None:
    """Number of /prefix_length networks in one /allocation_prefix_length allocation.

    Returns None when the prefix is shorter than the allocation itself.
    """
    if not 0 <= allocation_prefix_length <= ADDRESS_BITS:
        raise ValueError(f"Allocation prefix length {allocation_prefix_length} out of range 0-{ADDRESS_BITS}")
    if prefix_length < allocation_prefix_length:
        return None
    return str(1 << (prefix_length - allocation_prefix_length))


# Codec boundary


def invalid_record(raw_input: str, kind: ErrorKind, detail: str) -> AddressRecord:
    return AddressRecord(raw_input=raw_input, valid=False, error=kind, error_detail=detail)


def parse(text: str, *, allocation_prefix_length: int = DEFAULT_ALLOCATION_PREFIX_LENGTH) -> AddressRecord:
    """Parse an IPv6 address or prefix into an ``AddressRecord``.

    Args:
        text: Address with optional ``/prefix`` suffix (e.g., 2001:db8::/32)
        allocation_prefix_length: Allocation boundary used for ``total_subnets``

    Returns:
        A fully populated record, or an invalid record carrying the error kind
        and detail. Never raises for bad input.
    """
    raw_input = text.strip()

    try:
        words, prefix_length = parse_words(raw_input)
    except AddressParseError as e:
        logger.debug("Rejected IPv6 input", extra={"input": raw_input, "error": e.kind.value})
        return invalid_record(raw_input, e.kind, e.detail)

    classification = classify(words)
    network = network_address(words, prefix_length)

    return AddressRecord(
        raw_input=raw_input,
        valid=True,
        word128=words,
        prefix_length=prefix_length,
        expanded=to_expanded(words),
        compressed=to_compressed(words),
        binary=to_binary(words),
        hex=to_hex(words),
        integer=to_integer(words),
        base64=to_base64(words),
        reverse_dns=to_reverse_dns(words),
        network=format_prefix(network, prefix_length),
        first_address=to_compressed(network),
        last_address=to_compressed(last_address(words, prefix_length)),
        host_count=count_hosts(prefix_length),
        total_subnets=count_allocation_subnets(prefix_length, allocation_prefix_length),
        classification=classification,
        scope=get_scope(words, classification),
        flags=get_flags(words, prefix_length),
        compliance_notes=get_compliance_notes(classification),
    )
