"""Query parameter encoding helpers.

The API takes every GET argument in the query string. Scalars are sent
as plain strings, while lists and filtering objects are sent as a
single JSON-encoded string parameter. Each helper here mutates a
``params`` dict in place and leaves it untouched when the value is
unset, so the server applies its own default.

Examples:
    >>> params = {"advertiser_id": "123"}
    >>> add_pagination(params, page=1, page_size=None)
    >>> add_string_slice(params, "fields", ["campaign_id", "budget"])
    >>> params
    {'advertiser_id': '123', 'page': '1', 'fields': '["campaign_id","budget"]'}
"""

import json
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from pydantic import BaseModel

from ..exceptions import RequestEncodingError

QueryParams = Dict[str, Union[str, List[str]]]


def add_pagination(
    params: QueryParams, page: Optional[int] = None, page_size: Optional[int] = None
) -> None:
    """Set ``page`` and ``page_size`` when supplied.

    :param params: Query parameters to update
    :type params: QueryParams
    :param page: Page number, or None to let the server default
    :type page: Optional[int]
    :param page_size: Page size, or None to let the server default
    :type page_size: Optional[int]
    """
    if page is not None:
        params["page"] = str(page)
    if page_size is not None:
        params["page_size"] = str(page_size)


def _prune(value: Any) -> Any:
    # Drop None and empty lists at every level of a dumped model
    if isinstance(value, dict):
        return {
            k: _prune(v)
            for k, v in value.items()
            if v is not None and not (isinstance(v, list) and not v)
        }
    if isinstance(value, list):
        return [_prune(v) for v in value]
    return value


def encode_json(value: Any, key: Optional[str] = None) -> str:
    """JSON-encode a value for use as a query parameter.

    Pydantic models are dumped by alias with unset (``None``) fields and
    empty lists removed; everything else goes through :func:`json.dumps`.

    :param value: Value to encode
    :type value: Any
    :param key: Parameter name, used in the error message
    :type key: Optional[str]
    :return: Compact JSON string
    :rtype: str
    :raises RequestEncodingError: If the value is not JSON serializable
    """
    try:
        if isinstance(value, BaseModel):
            value = _prune(
                value.model_dump(mode="json", exclude_none=True, by_alias=True)
            )
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise RequestEncodingError(f"failed to marshal {key}: {e}", key=key) from e


def add_json_param(params: QueryParams, key: str, value: Any) -> None:
    """Set ``key`` to the JSON encoding of ``value``.

    Nothing is set when ``value`` is None, encodes to the literal
    ``null``, or is an empty list or tuple. Python cannot tell an empty
    list of strings from any other empty list, so every empty list is
    treated as "no filter" and ``[]`` is never sent. Empty dicts and
    models are still sent (as ``{}``).

    :param params: Query parameters to update
    :type params: QueryParams
    :param key: Parameter name
    :type key: str
    :param value: Filtering model, dict, list or any JSON-serializable value
    :type value: Any
    :raises RequestEncodingError: If the value is not JSON serializable
    """
    if value is None:
        return
    if isinstance(value, (list, tuple)) and not value:
        return
    encoded = encode_json(value, key)
    if encoded == "null":
        return
    params[key] = encoded


def add_string_slice(
    params: QueryParams, key: str, values: Optional[Sequence[str]]
) -> None:
    """Set ``key`` to a JSON array of ``values``, preserving order.

    An empty or missing sequence leaves the parameter out entirely,
    which the API reads as "no filter" rather than "match nothing".

    :param params: Query parameters to update
    :type params: QueryParams
    :param key: Parameter name
    :type key: str
    :param values: Strings to encode
    :type values: Optional[Sequence[str]]
    """
    if not values:
        return
    add_json_param(params, key, list(values))


def add_optional(params: QueryParams, key: str, value: Any) -> None:
    """Set a scalar parameter when it is not None.

    Booleans are rendered as ``true``/``false``.

    :param params: Query parameters to update
    :type params: QueryParams
    :param key: Parameter name
    :type key: str
    :param value: Scalar value
    :type value: Any
    """
    if value is None:
        return
    if isinstance(value, bool):
        params[key] = "true" if value else "false"
    else:
        params[key] = str(value)


def add_repeated(
    params: QueryParams, key: str, values: Optional[Iterable[str]]
) -> None:
    """Add one ``key=value`` pair per value (``?k=a&k=b``).

    A few endpoints read id lists as repeated keys instead of a JSON
    array.

    :param params: Query parameters to update
    :type params: QueryParams
    :param key: Parameter name
    :type key: str
    :param values: Values to repeat
    :type values: Optional[Iterable[str]]
    """
    values = [str(v) for v in values or ()]
    if values:
        params[key] = values
