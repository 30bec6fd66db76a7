from .polyline_decoder import Coordinate, decode, encode

__all__ = ["Coordinate", "decode", "encode"]
