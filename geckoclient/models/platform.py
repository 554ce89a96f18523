from typing import Literal

from geckoclient.models.common import GeckoModel, Params


class AssetPlatformParams(Params):
    filter: Literal["nft"] | None = None


class AssetPlatform(GeckoModel):
    id: str
    chain_identifier: int | None = None
    name: str | None = None
    shortname: str | None = None
