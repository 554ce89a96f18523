from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Precision = Literal[
    "full", "0", "1", "2", "3", "4", "5", "6", "7", "8", "9",
    "10", "11", "12", "13", "14", "15", "16", "17", "18",
]  # fmt: skip

Locale = Literal[
    "ar", "bg", "cs", "da", "de", "el", "en", "es", "fi", "fr", "he", "hi",
    "hr", "hu", "id", "it", "ja", "ko", "lt", "nl", "no", "pl", "pt", "ro",
    "ru", "sk", "sl", "sv", "th", "tr", "uk", "vi", "zh", "zh-tw",
]  # fmt: skip


class GeckoModel(BaseModel):
    """Base for response shapes. Fields the API adds later are kept, not rejected."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Params(BaseModel):
    """
    Base for request parameter bags.

    Extra keys are forwarded to the API untouched, and fields whose wire name
    is a Python keyword can be set by either name.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class PaginationParams(Params):
    # Documented range is 1..250; the API itself rejects anything else.
    per_page: int | None = Field(None, description="Results per page (1-250).")
    page: int | None = Field(None, description="Page number.")


class ImageData(GeckoModel):
    thumb: str | None = None
    small: str | None = None
    large: str | None = None
