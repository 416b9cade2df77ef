"""gmaps_static package public API.

Submodules are imported lazily so that reading the configuration does not pull
in requests/Pillow.
"""

__all__ = ["static_map", "fetch_static_map", "build_url"]


def __getattr__(name):  # lazy re-export
    if name in __all__:
        from . import api as _api

        return getattr(_api, name)
    raise AttributeError(name)
