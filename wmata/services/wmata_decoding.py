"""Decoding of WMATA response bodies into typed records.

JSON bodies map directly onto the record aliases. XML bodies are first
flattened into the same dictionary shape by walking the record's fields:

- a list field reads every child of its wrapper element
  (``<Predictions><NextBusPrediction/>...</Predictions>``)
- a nested record recurses into the matching element
- a scalar reads the element text; ``i:nil="true"`` maps to None and an
  empty element maps to "" for strings and None otherwise

Element namespaces are ignored below the root. The root element must match
the record's ``xml_root`` in the WMATA namespace.
"""

from __future__ import annotations

import json
import logging
import types
import typing
from typing import Any, TypeVar
from xml.etree import ElementTree as ET

from pydantic import BaseModel, ValidationError

from wmata.core.constants import ResponseFormat
from wmata.models.base import WMATAResponse, XMLName
from wmata.services.wmata_errors import DecodeError

logger = logging.getLogger(__name__)

XSI_NIL = "{http://www.w3.org/2001/XMLSchema-instance}nil"

ResponseT = TypeVar("ResponseT", bound=WMATAResponse)


def split_tag(tag: str) -> tuple[str, str]:
    """Split an ElementTree ``{namespace}local`` tag into its two parts."""
    if tag.startswith("{"):
        space, _, local = tag[1:].partition("}")
        return space, local
    return "", tag


def _unwrap_optional(annotation: Any) -> Any:
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _scalar_text(element: ET.Element, annotation: Any) -> str | None:
    if element.get(XSI_NIL) == "true":
        return None
    text = element.text or ""
    if text == "" and annotation is not str:
        return None
    return text


def _element_value(element: ET.Element, annotation: Any) -> Any:
    annotation = _unwrap_optional(annotation)
    if typing.get_origin(annotation) is list:
        (item_type,) = typing.get_args(annotation) or (str,)
        return [_element_value(child, item_type) for child in element]
    if _is_model(annotation):
        return element_to_payload(element, annotation)
    return _scalar_text(element, annotation)


def element_to_payload(element: ET.Element, model: type[BaseModel]) -> dict[str, Any]:
    """Flatten an XML element into the alias-keyed dict ``model`` validates."""
    children: dict[str, ET.Element] = {}
    for child in element:
        children.setdefault(split_tag(child.tag)[1], child)

    payload: dict[str, Any] = {}
    for name, field in model.model_fields.items():
        key = field.alias or name
        child = children.get(key)
        if child is None:
            continue
        payload[key] = _element_value(child, field.annotation)
    return payload


def decode_json(body: bytes | str, model: type[ResponseT]) -> ResponseT:
    """Decode a JSON body into ``model``."""
    try:
        return model.model_validate(json.loads(body))
    except (ValueError, ValidationError) as exc:
        raise DecodeError(
            f"Failed to decode JSON body into {model.__name__}: {exc}",
            response_format=ResponseFormat.JSON,
        ) from exc


def decode_xml(body: bytes | str, model: type[ResponseT]) -> ResponseT:
    """Decode an XML body into ``model``, recording the root element name."""
    try:
        root = ET.fromstring(body)
    except ET.ParseError as exc:
        raise DecodeError(
            f"Failed to parse XML body for {model.__name__}: {exc}",
            response_format=ResponseFormat.XML,
        ) from exc

    space, local = split_tag(root.tag)
    if model.xml_root and (space, local) != (model.xml_namespace, model.xml_root):
        raise DecodeError(
            f"Expected element <{model.xml_root}> in namespace "
            f"'{model.xml_namespace}' but have <{local}> in '{space}'.",
            response_format=ResponseFormat.XML,
        )

    payload = element_to_payload(root, model)
    payload["xml_name"] = XMLName(space=space, local=local)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(
            f"Failed to decode XML body into {model.__name__}: {exc}",
            response_format=ResponseFormat.XML,
        ) from exc


def decode_body(
    response_format: ResponseFormat, body: bytes | str, model: type[ResponseT]
) -> ResponseT:
    """Dispatch to the decoder matching ``response_format``."""
    if response_format is ResponseFormat.JSON:
        return decode_json(body, model)
    if response_format is ResponseFormat.XML:
        return decode_xml(body, model)
    raise ValueError(f"Unsupported response format '{response_format}'.")


__all__ = [
    "decode_body",
    "decode_json",
    "decode_xml",
    "element_to_payload",
    "split_tag",
]
