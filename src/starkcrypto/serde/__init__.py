"""Serialization / deserialization (serde): public keys and signatures."""

from .public_key import (compress, decode_public_key, decompress,
                         encode_public_key, get_stark_public_key,
                         get_x_coordinate, get_y_coordinate,
                         public_key_from_hex)
from .signature import deserialize_signature, serialize_signature

__all__: tuple[str, ...] = (
    "compress",
    "decode_public_key",
    "decompress",
    "deserialize_signature",
    "encode_public_key",
    "get_stark_public_key",
    "get_x_coordinate",
    "get_y_coordinate",
    "public_key_from_hex",
    "serialize_signature",
)
