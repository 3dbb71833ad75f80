"""XOR distance between leaf ids.

The distance of two equal-length ids is the XOR of their payload bits read
as unsigned integers, rendered as zero-padded hex. Leaves that share a long
path prefix agree on their high bits, so a small distance means the two
leaves are close in the tree.

Invalid input never raises: ids that are too short, of different lengths or
not binary all map to the zero distance so the heat map stays renderable
while a selection is stale or empty.
"""

from __future__ import annotations

import logging
import math

from ..tree.models import ID_PREFIX

logger = logging.getLogger(__name__)

ZERO_DISTANCE = "0x00"
HEX_PREFIX = "0x"
_MIN_ID_LENGTH = len(ID_PREFIX) + 1


def _is_bit_id(node_id: str) -> bool:
    payload = node_id[len(ID_PREFIX):]
    return node_id.startswith(ID_PREFIX) and bool(payload) and set(payload) <= {"0", "1"}


def distance(first: str, second: str) -> str:
    """Symmetric XOR distance of two leaf ids as a ``0x``-prefixed hex string.

    The hex part has ``max(2, ceil(payload_bits / 4))`` digits.

    Example:
        >>> distance("0b000", "0b111")
        '0x07'
        >>> distance("0b0101", "0b0101")
        '0x00'
    """
    if len(first) < _MIN_ID_LENGTH or len(second) < _MIN_ID_LENGTH:
        return ZERO_DISTANCE
    if len(first) != len(second):
        logger.debug("Distance of mismatched ids %s / %s -> zero", first, second)
        return ZERO_DISTANCE
    if not (_is_bit_id(first) and _is_bit_id(second)):
        logger.debug("Distance of malformed ids %s / %s -> zero", first, second)
        return ZERO_DISTANCE

    bits = len(first) - len(ID_PREFIX)
    digits = max(2, math.ceil(bits / 4))
    xor = int(first[len(ID_PREFIX):], 2) ^ int(second[len(ID_PREFIX):], 2)
    return f"{HEX_PREFIX}{xor:0{digits}x}"


def distance_value(hex_distance: str) -> int:
    """Integer value of a distance string; malformed input yields 0."""
    try:
        return int(hex_distance, 16)
    except (TypeError, ValueError):
        return 0


def pad_to_even(digits: str) -> str:
    """Left-pad a digit string with ``0`` to an even length."""
    return digits.zfill(len(digits) + len(digits) % 2)


def node_label(node_id: str) -> tuple[str, str]:
    """Header readout for a node: its payload bits and its hex node id.

    Example:
        >>> node_label("0b0110")
        ('0110', '0x06')
    """
    payload = node_id[len(ID_PREFIX):] if node_id.startswith(ID_PREFIX) else ""
    if not payload or not set(payload) <= {"0", "1"}:
        return payload, ZERO_DISTANCE
    return payload, HEX_PREFIX + pad_to_even(format(int(payload, 2), "x"))
