"""Static Maps request options: defaults, serialization and URL building.

Parameters understood by the Static Maps API (all optional except ``center``)::

    center    "40.714728,-73.998672" or a street address
    zoom      0 (whole world) .. 21 (streets), default 14
    size      pixel size "WxH", default "320x240"
    scale     2 for high-density screens
    format    "PNG", "GIF", "JPEG"
    maptype   "roadmap", "satellite", "hybrid", "terrain"
    language  language the labels are rendered in
    region    ccTLD country code, picks geo-political borders
    markers   "color:blue|label:S|11211|11206|11222"
    path      "color:0x0000ff|weight:5|40.737102,-73.990318|40.749825,-73.987963"
    visible   locations that must stay visible, e.g. "Toronto"
    style     "feature:administrative|element:labels|visibility:on"
    key       Google API key

``markers``, ``path`` and ``style`` carry their own ``|``/``:`` syntax; it is
passed through untouched (only percent-encoded). A list value yields one
``key=value`` pair per item.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from urllib.parse import quote, urlencode

from gmaps_static.config import settings
from gmaps_static.errors import MissingParameterError

STATIC_MAP_PARAMS: Tuple[str, ...] = (
    "center",
    "zoom",
    "size",
    "scale",
    "format",
    "maptype",
    "language",
    "region",
    "markers",
    "path",
    "visible",
    "style",
    "key",
)
REQUIRED_PARAMS: Tuple[str, ...] = ("center",)

# same set querystring.escape leaves alone
_SAFE_CHARS = "-_.!~*'()"


def with_defaults(options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Return a copy of ``options`` with ``zoom``/``size`` (and key) filled in."""
    merged: Dict[str, Any] = dict(options or {})
    if merged.get("zoom") is None:
        merged["zoom"] = settings.DEFAULT_ZOOM
    if not merged.get("size"):
        merged["size"] = settings.DEFAULT_SIZE
    if settings.API_KEY and "key" not in merged:
        merged["key"] = settings.API_KEY
    return merged


def _scalar(name: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if not math.isfinite(value):
            return ""
        # 2.0 -> "2", as JavaScript number formatting does
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, (str, int)):
        return str(value)
    raise TypeError(f"unsupported value for '{name}': {type(value).__name__}")


def _pairs(options: Mapping[str, Any]) -> Iterable[Tuple[str, str]]:
    for name, value in options.items():
        if isinstance(value, (list, tuple)):
            for item in value:
                yield str(name), _scalar(name, item)
        else:
            yield str(name), _scalar(name, value)


def build_query(options: Mapping[str, Any]) -> str:
    """Percent-encode ``options`` as a query string, no defaults applied."""
    pairs: List[Tuple[str, str]] = list(_pairs(options))
    return urlencode(pairs, safe=_SAFE_CHARS, quote_via=quote)


def build_url(options: Optional[Mapping[str, Any]], *, base_url: Optional[str] = None) -> str:
    """Build the full Static Maps URL for ``options`` with defaults applied."""
    return (base_url or settings.BASE_URL) + build_query(with_defaults(options))


def require_options(options: Optional[Mapping[str, Any]], required: Sequence[str] = REQUIRED_PARAMS) -> None:
    """Raise MissingParameterError for the first required field without a value."""
    options = options or {}
    for field in required:
        if options.get(field) is None:
            raise MissingParameterError(field)


def redact_url(url: str) -> str:
    """Mask the API key in ``url`` for logging."""
    head, sep, query = url.partition("?")
    if not sep:
        return url
    parts = [("key=***" if part.startswith("key=") else part) for part in query.split("&")]
    return head + sep + "&".join(parts)
