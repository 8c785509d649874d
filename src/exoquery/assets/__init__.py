from .catalog import (
    FALLBACK_TEXTURE,
    TEXTURE_ASSETS,
    resolve_texture_path,
    select_texture,
    validate_asset_table,
)
from .loader import load_texture

__all__ = [
    "FALLBACK_TEXTURE",
    "TEXTURE_ASSETS",
    "resolve_texture_path",
    "select_texture",
    "validate_asset_table",
    "load_texture",
]
