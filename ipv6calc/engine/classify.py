"""Address classification, scope, flags and RFC compliance notes.

Classification is a fixed-priority decision list: the first predicate that
matches decides the address type.
"""

from collections.abc import Callable

from ..models.address import AddressFlags, Classification, ComplianceNote, Scope
from .bits import Word128, to_int

Predicate = Callable[[Word128], bool]


def _is_unspecified(w: Word128) -> bool:
    return not any(w)


def _is_loopback(w: Word128) -> bool:
    return not any(w[:7]) and w[7] == 1


def _is_link_local(w: Word128) -> bool:
    return (w[0] & 0xFFC0) == 0xFE80


def _is_unique_local(w: Word128) -> bool:
    return (w[0] & 0xFE00) == 0xFC00


def _is_multicast(w: Word128) -> bool:
    return (w[0] & 0xFF00) == 0xFF00


def _is_ipv4_mapped(w: Word128) -> bool:
    return not any(w[:5]) and w[5] == 0xFFFF


def _has_ipv4_compatible_prefix(w: Word128) -> bool:
    return not any(w[:6])


def _is_teredo(w: Word128) -> bool:
    return w[0] == 0x2001 and w[1] == 0x0000


def _is_six_to_four(w: Word128) -> bool:
    return w[0] == 0x2002


def _is_documentation(w: Word128) -> bool:
    return w[0] == 0x2001 and 0x0DB8 <= w[1] <= 0x0DBF


def _is_global_unicast(w: Word128) -> bool:
    return (w[0] & 0xE000) == 0x2000


CLASSIFICATION_RULES: tuple[tuple[Predicate, Classification], ...] = (
    (_is_unspecified, Classification.UNSPECIFIED),
    (_is_loopback, Classification.LOOPBACK),
    (_is_link_local, Classification.LINK_LOCAL),
    (_is_unique_local, Classification.UNIQUE_LOCAL),
    (_is_multicast, Classification.MULTICAST),
    (_is_ipv4_mapped, Classification.IPV4_MAPPED),
    (_has_ipv4_compatible_prefix, Classification.IPV4_COMPATIBLE),
    (_is_teredo, Classification.TEREDO),
    (_is_six_to_four, Classification.SIX_TO_FOUR),
    (_is_documentation, Classification.DOCUMENTATION),
    (_is_global_unicast, Classification.GLOBAL_UNICAST),
)

# Multicast scope field (low 4 bits of the first word)
MULTICAST_SCOPES: dict[int, Scope] = {
    0x1: Scope.INTERFACE_LOCAL,
    0x2: Scope.LINK_LOCAL,
    0x4: Scope.ADMIN_LOCAL,
    0x5: Scope.SITE_LOCAL,
    0x8: Scope.ORGANIZATION_LOCAL,
    0xE: Scope.GLOBAL,
}

CLASSIFICATION_SCOPES: dict[Classification, Scope] = {
    Classification.LOOPBACK: Scope.INTERFACE_LOCAL,
    Classification.UNSPECIFIED: Scope.INTERFACE_LOCAL,
    Classification.LINK_LOCAL: Scope.LINK_LOCAL,
    Classification.UNIQUE_LOCAL: Scope.ORGANIZATION_LOCAL,
    Classification.GLOBAL_UNICAST: Scope.GLOBAL,
    Classification.IPV4_MAPPED: Scope.GLOBAL,
}


def classify(words: Word128) -> Classification:
    """Return the single classification of an address."""
    for predicate, classification in CLASSIFICATION_RULES:
        if predicate(words):
            return classification
    return Classification.RESERVED


def get_scope(words: Word128, classification: Classification) -> Scope:
    """Return the scope of an address given its classification."""
    if classification == Classification.MULTICAST:
        return MULTICAST_SCOPES.get(words[0] & 0x000F, Scope.GLOBAL)
    return CLASSIFICATION_SCOPES.get(classification, Scope.GLOBAL)


def is_ipv4_mapped(words: Word128) -> bool:
    """True for ::ffff:0:0/96 addresses."""
    return _is_ipv4_mapped(words)


def is_ipv4_compatible(words: Word128) -> bool:
    """True for ::/96 addresses other than :: and ::1."""
    return _has_ipv4_compatible_prefix(words) and to_int(words[6:]) not in (0, 1)


def is_eui64(words: Word128) -> bool:
    """True if the interface identifier carries the EUI-64 ff:fe filler."""
    interface_id = to_int(words[4:])
    return (interface_id >> 24) & 0xFFFF == 0xFFFE


def get_flags(words: Word128, prefix_length: int) -> AddressFlags:
    return AddressFlags(
        is_ipv4_mapped=is_ipv4_mapped(words),
        is_ipv4_compatible=is_ipv4_compatible(words),
        is_eui64=is_eui64(words),
        is_slaac_eligible=prefix_length == 64,
    )


def get_compliance_notes(classification: Classification) -> tuple[ComplianceNote, ...]:
    """RFCs a successfully parsed address complies with.

    RFC 4291 and RFC 5952 always apply; RFC 4193 and RFC 4007 are added for
    unique local and link-local addresses.
    """
    notes = [
        ComplianceNote(
            rfc="RFC 4291",
            title="IP Version 6 Addressing Architecture",
            compliant=True,
            notes="Valid IPv6 address format",
        ),
        ComplianceNote(
            rfc="RFC 5952",
            title="A Recommendation for IPv6 Address Text Representation",
            compliant=True,
            notes="Follows canonical text representation rules",
        ),
    ]

    if classification == Classification.UNIQUE_LOCAL:
        notes.append(
            ComplianceNote(
                rfc="RFC 4193",
                title="Unique Local IPv6 Unicast Addresses",
                compliant=True,
                notes="Valid ULA format (fc00::/7)",
            )
        )

    if classification == Classification.LINK_LOCAL:
        notes.append(
            ComplianceNote(
                rfc="RFC 4007",
                title="IPv6 Scoped Address Architecture",
                compliant=True,
                notes="Valid link-local address (fe80::/10)",
            )
        )

    return tuple(notes)
