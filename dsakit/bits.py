"""Bit tricks: rounding an unsigned integer up to a power of two."""

_SUPPORTED_WIDTHS = (8, 16, 32, 64)


def round_up_pow2(value: int, bits: int = 64) -> int:
    """Round ``value`` up to the nearest power of two in a ``bits``-wide unsigned integer.

    Arithmetic wraps around as it does for a fixed-width unsigned integer:
    zero stays zero, and a value above the largest power of two that fits
    wraps to zero.
    """
    if bits not in _SUPPORTED_WIDTHS:
        raise ValueError(f"unsupported width {bits}; expected one of {_SUPPORTED_WIDTHS}")
    mask = (1 << bits) - 1
    if not 0 <= value <= mask:
        raise ValueError(f"{value} does not fit in {bits} unsigned bits")
    x = (value - 1) & mask
    shift = 1
    while shift < bits:
        x |= x >> shift
        shift <<= 1
    return (x + 1) & mask