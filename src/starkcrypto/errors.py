"""
Error taxonomy. Every condition is a ValueError subclass carrying an ErrorKind.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_FIELD_ELEMENT = "invalid_field_element"
    INVALID_HASH_INPUT = "invalid_hash_input"
    INVALID_PUBLIC_KEY = "invalid_public_key"
    NON_INTEGER_QUANTIZATION = "non_integer_quantization"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_INSTRUCTION_FIELD = "invalid_instruction_field"
    UNKNOWN_ASSET_TYPE = "unknown_asset_type"
    INVALID_DERIVATION_PATH = "invalid_derivation_path"
    INVALID_MESSAGE_HASH_LENGTH = "invalid_message_hash_length"
    INVALID_R_LENGTH = "invalid_r_length"
    INVALID_S_LENGTH = "invalid_s_length"
    INVALID_W_LENGTH = "invalid_w_length"
    DERIVATION_EXHAUSTED = "derivation_exhausted"
    SIGNING_RETRY_EXHAUSTED = "signing_retry_exhausted"
    INVALID_SIGNATURE_ENCODING = "invalid_signature_encoding"


class StarkCryptoError(ValueError):
    """Base class; `kind` identifies the condition independently of the message."""

    kind: ErrorKind


class InvalidFieldElement(StarkCryptoError):
    kind = ErrorKind.INVALID_FIELD_ELEMENT


class InvalidHashInput(StarkCryptoError):
    kind = ErrorKind.INVALID_HASH_INPUT


class InvalidPublicKey(StarkCryptoError):
    kind = ErrorKind.INVALID_PUBLIC_KEY


class NonIntegerQuantization(StarkCryptoError):
    kind = ErrorKind.NON_INTEGER_QUANTIZATION


class InvalidAmount(StarkCryptoError):
    kind = ErrorKind.INVALID_AMOUNT


class InvalidInstructionField(StarkCryptoError):
    kind = ErrorKind.INVALID_INSTRUCTION_FIELD


class UnknownAssetType(StarkCryptoError):
    kind = ErrorKind.UNKNOWN_ASSET_TYPE


class InvalidDerivationPath(StarkCryptoError):
    kind = ErrorKind.INVALID_DERIVATION_PATH


class InvalidMessageHashLength(StarkCryptoError):
    kind = ErrorKind.INVALID_MESSAGE_HASH_LENGTH


class InvalidRLength(StarkCryptoError):
    kind = ErrorKind.INVALID_R_LENGTH


class InvalidSLength(StarkCryptoError):
    kind = ErrorKind.INVALID_S_LENGTH


class InvalidWLength(StarkCryptoError):
    kind = ErrorKind.INVALID_W_LENGTH


class DerivationExhausted(StarkCryptoError):
    kind = ErrorKind.DERIVATION_EXHAUSTED


class SigningRetryExhausted(StarkCryptoError):
    kind = ErrorKind.SIGNING_RETRY_EXHAUSTED


class InvalidSignatureEncoding(StarkCryptoError):
    kind = ErrorKind.INVALID_SIGNATURE_ENCODING


__all__: tuple[str, ...] = (
    "ErrorKind",
    "StarkCryptoError",
    "InvalidFieldElement",
    "InvalidHashInput",
    "InvalidPublicKey",
    "NonIntegerQuantization",
    "InvalidAmount",
    "InvalidInstructionField",
    "UnknownAssetType",
    "InvalidDerivationPath",
    "InvalidMessageHashLength",
    "InvalidRLength",
    "InvalidSLength",
    "InvalidWLength",
    "DerivationExhausted",
    "SigningRetryExhausted",
    "InvalidSignatureEncoding",
)
