"""Pydantic models for render configuration and attribute documents."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class RenderOptions(BaseModel):
    """Per-call switches for attribute normalization and rendering."""

    encode: bool = Field(
        True,
        description="HTML-escape string values; disable when a DOM API escapes downstream.",
    )
    double_encode: bool = Field(
        True,
        alias="doubleEncode",
        description="Re-escape characters that already form an HTML entity.",
    )
    charset: str = Field(
        "utf-8", description="Charset used to decode byte strings before escaping."
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def as_kwargs(self) -> Dict[str, Any]:
        return {
            "encode": self.encode,
            "double_encode": self.double_encode,
            "charset": self.charset,
        }


class AttributeDocument(BaseModel):
    """Attribute map plus the options it should be rendered with."""

    attributes: Dict[str, Any] = Field(
        default_factory=dict, description="Attribute name to value mapping."
    )
    options: RenderOptions = Field(
        default_factory=RenderOptions, description="Render options for this document."
    )

    model_config = ConfigDict(populate_by_name=True)
