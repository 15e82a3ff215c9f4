"""Utility helpers for the TikTok Business API client."""

from .download import download_to_path
from .params import (
    QueryParams,
    add_json_param,
    add_optional,
    add_pagination,
    add_repeated,
    add_string_slice,
    encode_json,
)

__all__ = [
    "QueryParams",
    "add_json_param",
    "add_optional",
    "add_pagination",
    "add_repeated",
    "add_string_slice",
    "download_to_path",
    "encode_json",
]
