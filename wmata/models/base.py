"""Base classes shared by every WMATA record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wmata.core.constants import WMATA_XML_NAMESPACE


@dataclass(frozen=True)
class XMLName:
    """Qualified name of the root element an XML response was decoded from."""

    space: str
    local: str


class WMATAModel(BaseModel):
    """Plain record mirroring a WMATA JSON object or XML element.

    Field aliases carry the WMATA key names. Absent keys and explicit nulls
    both leave a field at its default.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class WMATAResponse(WMATAModel):
    """Top-level record returned by a WMATA endpoint."""

    xml_root: ClassVar[str] = ""
    xml_namespace: ClassVar[str] = WMATA_XML_NAMESPACE

    xml_name: XMLName | None = Field(default=None, exclude=True)


__all__ = ["XMLName", "WMATAModel", "WMATAResponse"]
