import math
from typing import Iterable, NamedTuple
from ..errors import DecodeError

CHAR_OFFSET: int = 63
CONTINUATION_BIT: int = 0x20
GROUP_MASK: int = 0x1F
GROUP_BITS: int = 5
DEFAULT_PRECISION: int = 5


class Coordinate(NamedTuple):
    latitude: float
    longitude: float


def scale_factor(precision: float) -> int:
    precision = math.trunc(precision)
    if precision < 0:
        raise ValueError(f"Precision must be non-negative, got {precision}")
    return 10 ** precision


def _read_delta(encoded: str, index: int) -> tuple[int, int]:
    value, shift = 0, 0
    while True:
        if index >= len(encoded):
            raise DecodeError("Polyline ends inside a value", index)
        group = ord(encoded[index]) - CHAR_OFFSET
        if not 0 <= group <= 0x3F:
            raise DecodeError(f"Invalid polyline character {encoded[index]!r}", index)
        index += 1
        value |= (group & GROUP_MASK) << shift
        shift += GROUP_BITS
        if not group & CONTINUATION_BIT:
            break
    delta = -((value + 1) // 2) if value & 1 else value // 2
    return delta, index


def decode(encoded: str, precision: float = DEFAULT_PRECISION) -> list[Coordinate]:
    """Decode ``encoded`` into ``(latitude, longitude)`` pairs.

    Fractional ``precision`` is truncated toward zero. Raises ``DecodeError`` when
    the string is truncated or holds characters outside ``'?'..'~'``; no partial
    result is returned.
    """
    if not encoded:
        return []
    factor = scale_factor(precision)
    coordinates: list[Coordinate] = []
    index, lat, lng = 0, 0, 0

    while index < len(encoded):
        lat_change, index = _read_delta(encoded, index)
        if index >= len(encoded):
            raise DecodeError("Polyline ends after a latitude without its longitude", index)
        lng_change, index = _read_delta(encoded, index)
        lat += lat_change
        lng += lng_change
        coordinates.append(Coordinate(lat / factor, lng / factor))

    return coordinates


def _round_half_away(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def _write_delta(delta: int) -> str:
    value = ~(delta << 1) if delta < 0 else delta << 1
    chunks = []
    while value >= CONTINUATION_BIT:
        chunks.append(chr((CONTINUATION_BIT | (value & GROUP_MASK)) + CHAR_OFFSET))
        value >>= GROUP_BITS
    chunks.append(chr(value + CHAR_OFFSET))
    return "".join(chunks)


def encode(coordinates: Iterable[tuple[float, float]], precision: float = DEFAULT_PRECISION) -> str:
    factor = scale_factor(precision)
    output = []
    prev_lat, prev_lng = 0, 0
    for latitude, longitude in coordinates:
        lat, lng = _round_half_away(latitude * factor), _round_half_away(longitude * factor)
        output.append(_write_delta(lat - prev_lat))
        output.append(_write_delta(lng - prev_lng))
        prev_lat, prev_lng = lat, lng
    return "".join(output)

