"""Signing schemas: exchange instruction digests and their STARK signatures."""

from ._messages import (ConditionalTransferParams, InstructionParams,
                        InstructionType, LimitOrderParams, TransferParams,
                        get_limit_order_msg_hash, get_msg_hash,
                        get_transfer_msg_hash, pack_instruction)
from ._starkex import (sign_limit_order, sign_msg, sign_transfer,
                       verify_limit_order, verify_signature, verify_transfer)

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
    "sign_limit_order",
    "sign_msg",
    "sign_transfer",
    "verify_limit_order",
    "verify_signature",
    "verify_transfer",
)
