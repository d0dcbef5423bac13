"""
Asset descriptors and their on-chain identifiers.

asset_type = keccak256(selector || [address] || quantum) & (2^250 - 1)
asset_id   = asset_type                                   (ETH, ERC20)
           = keccak256("NFT:" || asset_type || token_id) & (2^250 - 1)   (ERC721)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from .._hex import parse_int
from ..errors import InvalidAmount, InvalidInstructionField, UnknownAssetType
from ..hashes.keccak import keccak256, keccak256_int

MASK_250 = (1 << 250) - 1


class AssetKind(str, Enum):
    ETH = "ETH"
    ERC20 = "ERC20"
    ERC721 = "ERC721"


ASSET_SIGNATURES: dict[AssetKind, str] = {
    AssetKind.ETH: "ETH()",
    AssetKind.ERC20: "ERC20Token(address)",
    AssetKind.ERC721: "ERC721Token(address,uint256)",
}


def _check_address(value: int | str) -> int:
    address = parse_int(value, InvalidInstructionField, "token address")
    if not 0 <= address < 1 << 160:
        raise InvalidInstructionField("token address must be 20 bytes")
    return address


def _check_quantum(value: int | str) -> int:
    quantum = parse_int(value, InvalidAmount, "quantum", base=10)
    if quantum <= 0 or quantum >= 1 << 256:
        raise InvalidAmount("quantum must be a positive 256-bit integer")
    return quantum


@dataclass(frozen=True)
class EthAsset:
    kind: ClassVar[AssetKind] = AssetKind.ETH

    quantum: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "quantum", _check_quantum(self.quantum))


@dataclass(frozen=True)
class Erc20Asset:
    kind: ClassVar[AssetKind] = AssetKind.ERC20

    token_address: int | str
    quantum: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "token_address", _check_address(self.token_address))
        object.__setattr__(self, "quantum", _check_quantum(self.quantum))


@dataclass(frozen=True)
class Erc721Asset:
    kind: ClassVar[AssetKind] = AssetKind.ERC721

    token_address: int | str
    token_id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "token_address", _check_address(self.token_address))
        token_id = parse_int(self.token_id, InvalidInstructionField, "token id", base=10)
        if not 0 <= token_id < 1 << 256:
            raise InvalidInstructionField("token id must be a 256-bit unsigned integer")
        object.__setattr__(self, "token_id", token_id)


Asset = Union[EthAsset, Erc20Asset, Erc721Asset]


def asset_from_dict(data: dict[str, Any]) -> Asset:
    """
    Build an asset from its JSON shape.

    Args:
        data: {"type": "ETH" | "ERC20" | "ERC721", "data": {...}} where data holds
            "quantum", "tokenAddress" and "tokenId" as relevant. Decimal strings
            and hex addresses are accepted.

    Returns:
        The matching asset dataclass.
    """
    kind = data.get("type")
    fields = data.get("data") or {}
    try:
        if kind == AssetKind.ETH.value:
            return EthAsset(quantum=fields.get("quantum", 1))
        if kind == AssetKind.ERC20.value:
            return Erc20Asset(fields["tokenAddress"], fields.get("quantum", 1))
        if kind == AssetKind.ERC721.value:
            return Erc721Asset(fields["tokenAddress"], fields["tokenId"])
    except KeyError as exc:
        raise InvalidInstructionField(f"{kind} asset is missing {exc.args[0]!r}") from exc
    raise UnknownAssetType(f"unknown asset type {kind!r}")


def _check_kind(kind: AssetKind | str) -> AssetKind:
    try:
        return AssetKind(kind)
    except ValueError as exc:
        raise UnknownAssetType(f"unknown asset type {kind!r}") from exc


def get_asset_selector(kind: AssetKind | str) -> str:
    """
    Solidity selector of an asset class, e.g. "0xf47261b0" for ERC20.

    Args:
        kind: AssetKind or its name.

    Returns:
        "0x" followed by 8 hex chars.
    """
    signature = ASSET_SIGNATURES[_check_kind(kind)]
    return "0x" + keccak256(signature.encode("ascii"))[:4].hex()


def get_asset_type(asset: Asset) -> int:
    """
    Asset type: class selector, contract address and quantum, hashed and masked to 250 bits.

    Args:
        asset: EthAsset, Erc20Asset or Erc721Asset.

    Returns:
        The asset type as an int.
    """
    if not isinstance(asset, (EthAsset, Erc20Asset, Erc721Asset)):
        raise UnknownAssetType(f"not an asset: {type(asset).__name__}")
    blob = bytes.fromhex(get_asset_selector(asset.kind)[2:])
    if isinstance(asset, (Erc20Asset, Erc721Asset)):
        blob += asset.token_address.to_bytes(32, "big")
    quantum = 1 if isinstance(asset, Erc721Asset) else asset.quantum
    blob += quantum.to_bytes(32, "big")
    return keccak256_int(blob) & MASK_250


def get_asset_id(asset: Asset) -> int:
    """
    Asset id as used in exchange messages.

    Fungible assets are identified by their type; an ERC721 token folds its
    token id into the type under the "NFT:" domain.
    """
    asset_type = get_asset_type(asset)
    if not isinstance(asset, Erc721Asset):
        return asset_type
    blob = b"NFT:" + asset_type.to_bytes(32, "big") + asset.token_id.to_bytes(32, "big")
    return keccak256_int(blob) & MASK_250


__all__: tuple[str, ...] = (
    "ASSET_SIGNATURES",
    "Asset",
    "AssetKind",
    "Erc20Asset",
    "Erc721Asset",
    "EthAsset",
    "MASK_250",
    "asset_from_dict",
    "get_asset_id",
    "get_asset_selector",
    "get_asset_type",
)
