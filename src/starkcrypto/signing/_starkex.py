"""
Sign and verify exchange instructions: digest, then STARK ECDSA.
"""

from __future__ import annotations

from .._hex import strip_hex_prefix
from ..curves._weierstrass import Point
from ..curves.stark import Signature, sign, verify, verify_stark_key
from ..serde import deserialize_signature, public_key_from_hex
from ._messages import (InstructionParams, LimitOrderParams, TransferParams,
                        get_limit_order_msg_hash, get_msg_hash,
                        get_transfer_msg_hash)


def _as_signature(signature: tuple[int, ...] | str | bytes) -> tuple[int, ...]:
    if isinstance(signature, (str, bytes)):
        return deserialize_signature(signature)
    return signature


def verify_signature(
    public_key: Point | int | str,
    msg_hash: int | str,
    signature: tuple[int, ...] | str | bytes,
) -> bool:
    """
    Verify a signature against any accepted form of public key.

    Args:
        public_key: (x, y) point, x-only STARK key (int, or hex that is not a
            33/65-byte SEC1 encoding), or SEC1 hex key.
        msg_hash: Message hash in [0, 2^251).
        signature: (r, s), Signature, or its serialized form.

    Returns:
        True iff the signature is valid.
    """
    signature = _as_signature(signature)
    if isinstance(public_key, tuple):
        return verify(public_key, msg_hash, signature)
    if isinstance(public_key, str) and len(strip_hex_prefix(public_key.strip())) in (66, 130):
        return verify(public_key_from_hex(public_key), msg_hash, signature)
    return verify_stark_key(public_key, msg_hash, signature)


def sign_msg(private_key: int | str, params: InstructionParams) -> Signature:
    """Sign any supported instruction."""
    return sign(private_key, get_msg_hash(params))


def sign_transfer(private_key: int | str, params: TransferParams) -> Signature:
    """
    Sign a transfer or conditional transfer.

    Args:
        private_key: STARK private key of the sender.
        params: TransferParams or ConditionalTransferParams.

    Returns:
        Signature over the transfer digest.
    """
    return sign(private_key, get_transfer_msg_hash(params))


def sign_limit_order(private_key: int | str, params: LimitOrderParams) -> Signature:
    """
    Sign a limit order.

    Args:
        private_key: STARK private key of the order owner.
        params: LimitOrderParams.

    Returns:
        Signature over the order digest.
    """
    return sign(private_key, get_limit_order_msg_hash(params))


def verify_transfer(
    public_key: Point | int | str,
    params: TransferParams,
    signature: tuple[int, ...] | str | bytes,
) -> bool:
    return verify_signature(public_key, get_transfer_msg_hash(params), signature)


def verify_limit_order(
    public_key: Point | int | str,
    params: LimitOrderParams,
    signature: tuple[int, ...] | str | bytes,
) -> bool:
    return verify_signature(public_key, get_limit_order_msg_hash(params), signature)


__all__: tuple[str, ...] = (
    "sign_limit_order",
    "sign_msg",
    "sign_transfer",
    "verify_limit_order",
    "verify_signature",
    "verify_transfer",
)
