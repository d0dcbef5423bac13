"""Assets: descriptors, asset types and ids, quantization."""

from ._assets import (ASSET_SIGNATURES, Asset, AssetKind, Erc20Asset,
                      Erc721Asset, EthAsset, asset_from_dict, get_asset_id,
                      get_asset_selector, get_asset_type)
from .quantization import dequantize_amount, quantize_amount

__all__: tuple[str, ...] = (
    "ASSET_SIGNATURES",
    "Asset",
    "AssetKind",
    "Erc20Asset",
    "Erc721Asset",
    "EthAsset",
    "asset_from_dict",
    "dequantize_amount",
    "get_asset_id",
    "get_asset_selector",
    "get_asset_type",
    "quantize_amount",
)
