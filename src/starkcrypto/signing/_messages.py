"""
Exchange instruction digests (transfer, conditional transfer, limit order).

Fields are packed into one word, most significant first:
instruction_type | vault0 (31) | vault1 (31) | amount0 (63) | amount1 (63) | nonce (31) | expiration (22)
which is then Pedersen-hashed after the token/key (and condition) digest.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from .._hex import to_int
from ..assets import Asset, Erc20Asset, Erc721Asset, EthAsset, get_asset_id
from ..curves.stark import FIELD_PRIME, MAX_ECDSA_VAL
from ..errors import InvalidInstructionField, InvalidMessageHashLength
from ..hashes.pedersen import pedersen_hash

VAULT_ID_BITS = 31
AMOUNT_BITS = 63
NONCE_BITS = 31
EXPIRATION_BITS = 22


class InstructionType(IntEnum):
    LIMIT_ORDER = 0
    TRANSFER = 1
    CONDITIONAL_TRANSFER = 2


Token = Union[int, str, Asset]


@dataclass(frozen=True)
class TransferParams:
    """Transfer of `amount` (quantized) of `token` to the vault owned by `receiver_public_key`."""

    token: Token
    receiver_public_key: int | str
    sender_vault_id: int | str
    receiver_vault_id: int | str
    amount: int | str
    nonce: int | str
    expiration_timestamp: int | str


@dataclass(frozen=True)
class ConditionalTransferParams(TransferParams):
    """Transfer that only executes once the on-chain fact `condition` is registered."""

    condition: int | str


@dataclass(frozen=True)
class LimitOrderParams:
    vault_sell: int | str
    vault_buy: int | str
    amount_sell: int | str
    amount_buy: int | str
    token_sell: Token
    token_buy: Token
    nonce: int | str
    expiration_timestamp: int | str


def _bounded(value: int | str, bits: int, name: str) -> int:
    try:
        n = to_int(value, base=10)
    except (TypeError, ValueError) as exc:
        raise InvalidInstructionField(f"{name}: not an integer ({value!r})") from exc
    if not 0 <= n < 1 << bits:
        raise InvalidInstructionField(f"{name} out of range [0, 2^{bits})")
    return n


def _felt(value: Token, name: str) -> int:
    """Token, key or condition as a field element; assets map to their asset id."""
    if isinstance(value, (EthAsset, Erc20Asset, Erc721Asset)):
        return get_asset_id(value)
    try:
        n = to_int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInstructionField(f"{name}: not a hex integer ({value!r})") from exc
    if not 0 <= n < FIELD_PRIME:
        raise InvalidInstructionField(f"{name} is not a field element")
    return n


def pack_instruction(
    instruction_type: InstructionType,
    vault0: int | str,
    vault1: int | str,
    amount0: int | str,
    amount1: int | str,
    nonce: int | str,
    expiration_timestamp: int | str,
) -> int:
    """Pack the numeric fields of an instruction into a single word."""
    packed = int(instruction_type)
    for value, bits, name in (
        (vault0, VAULT_ID_BITS, "vault0"),
        (vault1, VAULT_ID_BITS, "vault1"),
        (amount0, AMOUNT_BITS, "amount0"),
        (amount1, AMOUNT_BITS, "amount1"),
        (nonce, NONCE_BITS, "nonce"),
        (expiration_timestamp, EXPIRATION_BITS, "expiration_timestamp"),
    ):
        packed = (packed << bits) + _bounded(value, bits, name)
    return packed


def _check_digest(msg_hash: int) -> int:
    if msg_hash >= MAX_ECDSA_VAL:
        raise InvalidMessageHashLength("Message not signable, invalid msgHash length.")
    return msg_hash


def get_transfer_msg_hash(params: TransferParams) -> int:
    """
    Digest of a transfer; ConditionalTransferParams also fold in the condition.

    Args:
        params: TransferParams or ConditionalTransferParams.

    Returns:
        Message hash in [0, 2^251).
    """
    conditional = isinstance(params, ConditionalTransferParams)
    packed = pack_instruction(
        InstructionType.CONDITIONAL_TRANSFER if conditional else InstructionType.TRANSFER,
        params.sender_vault_id,
        params.receiver_vault_id,
        params.amount,
        0,
        params.nonce,
        params.expiration_timestamp,
    )
    digest = pedersen_hash(
        _felt(params.token, "token"),
        _felt(params.receiver_public_key, "receiver_public_key"),
    )
    if conditional:
        digest = pedersen_hash(digest, _felt(params.condition, "condition"))
    return _check_digest(pedersen_hash(digest, packed))


def get_limit_order_msg_hash(params: LimitOrderParams) -> int:
    """
    Digest of a limit order.

    Args:
        params: LimitOrderParams.

    Returns:
        Message hash in [0, 2^251).
    """
    packed = pack_instruction(
        InstructionType.LIMIT_ORDER,
        params.vault_sell,
        params.vault_buy,
        params.amount_sell,
        params.amount_buy,
        params.nonce,
        params.expiration_timestamp,
    )
    digest = pedersen_hash(
        _felt(params.token_sell, "token_sell"),
        _felt(params.token_buy, "token_buy"),
    )
    return _check_digest(pedersen_hash(digest, packed))


InstructionParams = Union[TransferParams, ConditionalTransferParams, LimitOrderParams]


def get_msg_hash(params: InstructionParams) -> int:
    """Digest of any supported instruction."""
    if isinstance(params, TransferParams):
        return get_transfer_msg_hash(params)
    if isinstance(params, LimitOrderParams):
        return get_limit_order_msg_hash(params)
    raise InvalidInstructionField(f"unsupported instruction {type(params).__name__}")


__all__: tuple[str, ...] = (
    "ConditionalTransferParams",
    "InstructionParams",
    "InstructionType",
    "LimitOrderParams",
    "TransferParams",
    "get_limit_order_msg_hash",
    "get_msg_hash",
    "get_transfer_msg_hash",
    "pack_instruction",
)
