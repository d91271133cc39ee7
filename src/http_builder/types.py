"""
Core type definitions for http-builder.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol, Union

# Multi-valued, insertion ordered mapping used for query strings, headers and forms.
MultiDict = Dict[str, List[str]]

# Values accepted by with_query/with_header/with_form. Anything else is rendered with str().
ParamValue = Any
ParamMap = Optional[Mapping[str, ParamValue]]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Reader(Protocol):
    """A byte stream consumed by the request body."""
    def read(self, size: int = -1) -> Union[bytes, str]: ...


@dataclass
class StringBody:
    """Text body, sent UTF-8 encoded."""
    value: str


@dataclass
class BinaryBody:
    """Raw byte body."""
    value: bytes


@dataclass
class ReaderBody:
    """
    Stream body. Single-use: once a dispatch drains it, later requests are
    sent with an empty body.
    """
    reader: Reader
    drained: bool = False


@dataclass
class FormBody:
    """URL-encoded form body, accumulated by with_form/with_forms."""
    values: MultiDict = field(default_factory=dict)


# Exactly one representation is active at a time; None means no body.
Body = Optional[Union[StringBody, BinaryBody, ReaderBody, FormBody]]
