"""Word128 helpers.

An IPv6 address is held as a tuple of 8 unsigned 16-bit words, most
significant first. Bit positions are numbered 0..127 from the most
significant bit, so a prefix of length ``p`` covers bits ``[0, p)``.
"""

WORD_BITS = 16
WORD_COUNT = 8
ADDRESS_BITS = WORD_BITS * WORD_COUNT
WORD_MAX = 0xFFFF

Word128 = tuple[int, ...]

ZERO: Word128 = (0,) * WORD_COUNT


def _word_span(start_bit: int, end_bit: int, index: int) -> tuple[int, int]:
    """Return the (lo, hi) bit offsets of [start_bit, end_bit) inside word ``index``."""
    word_start = index * WORD_BITS
    lo = max(start_bit, word_start) - word_start
    hi = min(end_bit, word_start + WORD_BITS) - word_start
    return lo, hi


def _check_range(start_bit: int, end_bit: int) -> None:
    if not 0 <= start_bit <= end_bit <= ADDRESS_BITS:
        raise ValueError(f"Bit range [{start_bit}, {end_bit}) outside 0..{ADDRESS_BITS}")


def mask_bits(words: Word128, from_bit: int, to_bit: int = ADDRESS_BITS, fill: bool = False) -> Word128:
    """Clear (or set, with ``fill=True``) every bit in ``[from_bit, to_bit)``.

    Words wholly inside the range are zeroed or filled with 0xFFFF; the
    boundary words at either end only have their in-range bits touched.

    Args:
        words: Address to mask
        from_bit: First bit to change
        to_bit: One past the last bit to change (default: end of address)
        fill: Set the bits instead of clearing them

    Returns:
        New Word128 with the range masked
    """
    _check_range(from_bit, to_bit)
    result = list(words)

    for index in range(from_bit // WORD_BITS, (to_bit + WORD_BITS - 1) // WORD_BITS):
        lo, hi = _word_span(from_bit, to_bit, index)
        mask = ((1 << (hi - lo)) - 1) << (WORD_BITS - hi)
        if fill:
            result[index] |= mask
        else:
            result[index] &= ~mask & WORD_MAX

    return tuple(result)


def write_bits(words: Word128, start_bit: int, bit_count: int, value: int) -> Word128:
    """Write ``value`` into ``bit_count`` bits starting at ``start_bit``, MSB first.

    The written range may straddle several words and start or end part-way
    through a word. Bits outside the range are preserved.

    Raises:
        ValueError: If the range leaves the address or ``value`` needs more bits
    """
    end_bit = start_bit + bit_count
    _check_range(start_bit, end_bit)
    if value < 0 or value >> bit_count:
        raise ValueError(f"Value {value} does not fit in {bit_count} bits")

    result = list(words)

    for index in range(start_bit // WORD_BITS, (end_bit + WORD_BITS - 1) // WORD_BITS):
        lo, hi = _word_span(start_bit, end_bit, index)
        width = hi - lo
        # Bits of value still to be written after this word
        remaining = end_bit - (index * WORD_BITS + hi)
        chunk = (value >> remaining) & ((1 << width) - 1)
        shift = WORD_BITS - hi
        mask = ((1 << width) - 1) << shift
        result[index] = (result[index] & ~mask & WORD_MAX) | (chunk << shift)

    return tuple(result)


def to_int(words: Word128) -> int:
    """Return the 128-bit unsigned integer value of ``words``."""
    value = 0
    for word in words:
        value = (value << WORD_BITS) | word
    return value


def to_bytes(words: Word128) -> bytes:
    """Return the 16 raw bytes of ``words``, high byte of each word first."""
    return b"".join(word.to_bytes(2, "big") for word in words)


def common_prefix_length(left: Word128, right: Word128) -> int:
    """Number of leading bits shared by two addresses (0..128)."""
    common = 0
    for a, b in zip(left, right):
        diff = a ^ b
        if diff == 0:
            common += WORD_BITS
            continue
        common += WORD_BITS - diff.bit_length()
        break
    return common
