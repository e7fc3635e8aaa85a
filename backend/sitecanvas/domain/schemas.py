"""
Shapes of the content tree submitted by the editor.

These models only check structure (types, required keys). Cross-page rules
such as slug uniqueness live in ``sitecanvas.domain.invariants``.
"""
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr

# Sort key only. Gaps and duplicates are fine, bools and strings are not.
OrderValue = Union[StrictInt, Annotated[float, Field(strict=True, allow_inf_nan=False)]]


class ElementIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[StrictStr] = Field(default=None, validation_alias=AliasChoices("id", "_id"))
    type: StrictStr = Field(min_length=1)
    order: OrderValue
    config: Dict[str, Any] = Field(default_factory=dict)


class PageIn(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[StrictStr] = Field(default=None, validation_alias=AliasChoices("id", "_id"))
    name: StrictStr = Field(min_length=1)
    slug: StrictStr
    elements: List[ElementIn] = Field(default_factory=list)
    seo_title: Optional[StrictStr] = Field(default=None, alias="seoTitle")
    seo_description: Optional[StrictStr] = Field(default=None, alias="seoDescription")


class GlobalSettingsIn(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    site_name: Optional[StrictStr] = Field(default=None, alias="siteName")
    font_family: Optional[StrictStr] = Field(default=None, alias="fontFamily")
    font_headline: Optional[StrictStr] = Field(default=None, alias="fontHeadline")
    favicon_url: Optional[StrictStr] = Field(default=None, alias="faviconUrl")
    primary_color: Optional[StrictStr] = Field(default=None, alias="primaryColor")
    secondary_color: Optional[StrictStr] = Field(default=None, alias="secondaryColor")


def format_error_location(prefix: str, loc) -> str:
    """Turn a pydantic error location into ``pages[0].elements[2].order``."""
    path = prefix
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}"
    return path


class NavigationItemIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    label: StrictStr = Field(min_length=1)
    url: StrictStr = Field(min_length=1)
    type: Literal["internal", "external"] = "internal"


class NavigationIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(min_length=1, max_length=100)
    items: List[NavigationItemIn] = Field(default_factory=list)


class NavigationUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[StrictStr] = Field(default=None, min_length=1, max_length=100)
    items: Optional[List[NavigationItemIn]] = None


def schema_messages(exc, prefix: str = "") -> List[str]:
    """Flatten a pydantic error into editor-facing messages."""
    return [
        f"{format_error_location(prefix, err['loc']).lstrip('.')}: {err['msg']}"
        for err in exc.errors()
    ]
