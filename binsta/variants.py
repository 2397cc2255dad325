# variants.py
from enum import Enum
from typing import Mapping, Optional, Union

from pydantic import BaseModel

Option = Optional[Union[str, Enum]]

# The service parses transform options positionally, so the order is fixed.
_PARAM_ORDER = ("format", "size", "quality")


def _option_value(value: Union[str, Enum]) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def build_variant_url(
    base_url: str,
    file_id: str,
    *,
    format: Option = None,
    size: Option = None,
    quality: Option = None,
) -> str:
    """
    Builds the URL of a transformed variant of a file. No request is made.

    Only the options that are given appear in the query, always in the order
    format, size, quality.
    """
    options = {"format": format, "size": size, "quality": quality}
    query = "&".join(
        f"{name}={_option_value(options[name])}"
        for name in _PARAM_ORDER
        if options[name]
    )
    url = f"{base_url.rstrip('/')}/files/{file_id}/transform"
    return f"{url}?{query}" if query else url


def variant_url_for(
    base_url: str, file_id: str, transform: Union[BaseModel, Mapping[str, Option]]
) -> str:
    """Same as build_variant_url, with the options taken from a transform model or mapping."""
    if isinstance(transform, BaseModel):
        transform = transform.model_dump(exclude_none=True)
    unknown = set(transform) - set(_PARAM_ORDER)
    if unknown:
        raise ValueError(f"Unknown transform options: {', '.join(sorted(unknown))}")
    return build_variant_url(
        base_url,
        file_id,
        format=transform.get("format"),
        size=transform.get("size"),
        quality=transform.get("quality"),
    )
