"""Records for token metadata program instructions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PbCreatorLayout:
    address: str = ""
    verified: bool = False
    share: int = 0


@dataclass
class PbCollectionLayout:
    verified: bool = False
    key: str = ""


@dataclass
class PbUsesLayout:
    use_method: str = ""
    remaining: int = 0
    total: int = 0


@dataclass
class PbCollectionDetailsLayout:
    name: str = ""
    size: int = 0


@dataclass
class PbDataLayout:
    name: str = ""
    symbol: str = ""
    uri: str = ""
    seller_fee_basis_points: int = 0
    creators: list[PbCreatorLayout] = field(default_factory=list)


@dataclass
class PbDataV2Layout:
    name: str = ""
    symbol: str = ""
    uri: str = ""
    seller_fee_basis_points: int = 0
    creators: list[PbCreatorLayout] = field(default_factory=list)
    collection: Optional[PbCollectionLayout] = None
    uses: Optional[PbUsesLayout] = None


@dataclass
class PbAssetDataLayout:
    name: str = ""
    symbol: str = ""
    uri: str = ""
    seller_fee_basis_points: int = 0
    creators: list[PbCreatorLayout] = field(default_factory=list)
    primary_sale_happened: bool = False
    is_mutable: bool = False
    token_standard: str = ""
    collection: Optional[PbCollectionLayout] = None
    uses: Optional[PbUsesLayout] = None
    collection_details: Optional[PbCollectionDetailsLayout] = None
    rule_set: Optional[str] = None


@dataclass
class PbPrintSupplyLayout:
    name: str = ""
    val: Optional[int] = None


@dataclass
class PbCreateArgsLayout:
    name: str = ""
    asset_data: Optional[PbAssetDataLayout] = None
    decimals: Optional[int] = None
    print_supply: Optional[PbPrintSupplyLayout] = None


@dataclass
class PbCreateMetadataAccountArgsLayout:
    data: Optional[PbDataLayout] = None
    is_mutable: bool = False


@dataclass
class PbCreateMetadataAccountArgsV2Layout:
    data: Optional[PbDataV2Layout] = None
    is_mutable: bool = False


@dataclass
class PbCreateMetadataAccountArgsV3Layout:
    data: Optional[PbDataV2Layout] = None
    is_mutable: bool = False
    collection_details: Optional[PbCollectionDetailsLayout] = None


@dataclass
class Arg:
    create_metadata_account_args: Optional[PbCreateMetadataAccountArgsLayout] = None
    create_metadata_account_args_v2: Optional[PbCreateMetadataAccountArgsV2Layout] = None
    create_metadata_account_args_v3: Optional[PbCreateMetadataAccountArgsV3Layout] = None
    create_args: Optional[PbCreateArgsLayout] = None
    instruction_type: str = ""


@dataclass
class InputAccounts:
    metadata: Optional[str] = None
    mint: Optional[str] = None
    mint_authority: Optional[str] = None
    payer: Optional[str] = None
    system_program: Optional[str] = None
    update_authority: Optional[str] = None
    use_authority: Optional[str] = None
    rent: Optional[str] = None


@dataclass
class TokenMetadataMeta:
    block_date: str = ""
    block_time: int = 0
    tx_id: str = ""
    dapp: str = ""
    block_slot: int = 0
    instruction_index: int = 0
    is_inner_instruction: bool = False
    inner_instruction_index: int = 0
    instruction_type: str = ""
    args: Optional[Arg] = None
    input_accounts: Optional[InputAccounts] = None


@dataclass
class TokenMetas:
    data: list[TokenMetadataMeta] = field(default_factory=list)