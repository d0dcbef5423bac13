"""
StarkEx client crypto: STARK keys from BIP-39 seeds, Pedersen hash, instruction
digests and STARK ECDSA. Pure Python, no third-party runtime dependencies.
"""

import logging

from .__about__ import __version__
from .assets import (Erc20Asset, Erc721Asset, EthAsset, asset_from_dict,
                     dequantize_amount, get_asset_id, get_asset_selector,
                     get_asset_type, quantize_amount)
from .curves import (EC_ORDER, FIELD_PRIME, MAX_ECDSA_VAL,
                     MAX_SIGNING_ATTEMPTS, STARK_CURVE, Signature,
                     private_to_public_key, private_to_stark_key, sign, verify,
                     verify_stark_key)
from .derivation import (MAX_GRIND_ITERATIONS, KeyPair, derive_key_pair,
                         get_account_path, get_key_pair_from_path,
                         get_private_key_from_path, grind_key,
                         mnemonic_to_seed)
from .errors import ErrorKind, StarkCryptoError
from .hashes import (keccak256, pedersen_hash, pedersen_hash_as_point,
                     pedersen_hash_chain)
from .serde import (compress, decode_public_key, decompress,
                    deserialize_signature, encode_public_key,
                    get_stark_public_key, get_x_coordinate, get_y_coordinate,
                    serialize_signature)
from .signing import (ConditionalTransferParams, LimitOrderParams,
                      TransferParams, get_limit_order_msg_hash, get_msg_hash,
                      get_transfer_msg_hash, sign_limit_order, sign_transfer,
                      verify_limit_order, verify_signature, verify_transfer)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Errors
    "ErrorKind",
    "StarkCryptoError",
    # Hashes
    "keccak256",
    "pedersen_hash",
    "pedersen_hash_as_point",
    "pedersen_hash_chain",
    # Curves: STARK curve keys and ECDSA
    "EC_ORDER",
    "FIELD_PRIME",
    "MAX_ECDSA_VAL",
    "MAX_SIGNING_ATTEMPTS",
    "STARK_CURVE",
    "Signature",
    "private_to_public_key",
    "private_to_stark_key",
    "sign",
    "verify",
    "verify_stark_key",
    # Derivation: BIP-39 / BIP-32 / grinding
    "KeyPair",
    "MAX_GRIND_ITERATIONS",
    "derive_key_pair",
    "get_account_path",
    "get_key_pair_from_path",
    "get_private_key_from_path",
    "grind_key",
    "mnemonic_to_seed",
    # Serde: public keys and signatures
    "compress",
    "decode_public_key",
    "decompress",
    "deserialize_signature",
    "encode_public_key",
    "get_stark_public_key",
    "get_x_coordinate",
    "get_y_coordinate",
    "serialize_signature",
    # Assets
    "Erc20Asset",
    "Erc721Asset",
    "EthAsset",
    "asset_from_dict",
    "dequantize_amount",
    "get_asset_id",
    "get_asset_selector",
    "get_asset_type",
    "quantize_amount",
    # Signing: exchange instructions
    "ConditionalTransferParams",
    "LimitOrderParams",
    "TransferParams",
    "get_limit_order_msg_hash",
    "get_msg_hash",
    "get_transfer_msg_hash",
    "sign_limit_order",
    "sign_transfer",
    "verify_limit_order",
    "verify_signature",
    "verify_transfer",
)
