"""Request URI construction for both Bittrex API versions."""

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from bittrex_api.api.constants import BASE_URLS, ApiVersion

ParamValue = str | int | float | Decimal | Enum | None


def format_value(value: Any) -> str:
    """
    Render a parameter value for the query string.

    Numbers use plain decimal notation without exponent or trailing zeros,
    e.g. 1e-08 -> "0.00000001", 2.50 -> "2.5", 100.0 -> "100".
    """
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float | Decimal):
        number = Decimal(repr(value)) if isinstance(value, float) else value
        return format(number.normalize(), "f")
    return str(value)


def encode_params(params: Mapping[str, ParamValue] | None) -> str:
    """Form-encode params in insertion order, dropping None values."""
    if not params:
        return ""
    return urlencode(
        [(key, format_value(value)) for key, value in params.items() if value is not None]
    )


def build_uri(
    version: ApiVersion,
    path: str,
    params: Mapping[str, ParamValue] | None = None,
) -> str:
    """
    Build the full request URI.

    The '?' is only added when there is a query string; URL normalization
    drops an empty one, and the signature must cover the URI as sent.
    """
    uri = BASE_URLS[version].format(path=path)
    query = encode_params(params)
    return f"{uri}?{query}" if query else uri
