import asyncio
from pathlib import Path
from typing import Union

from PIL import Image

from ..errors import AssetLoadError


def _read_image(path: Path) -> Image.Image:
    with Image.open(path) as image:
        # Force decode while the file is open
        return image.convert("RGBA")


async def load_texture(path: Union[str, Path]) -> Image.Image:
    """Load a base texture image off the event loop.

    Args:
        path: Image file to read

    Returns:
        Decoded RGBA image

    Raises:
        AssetLoadError: If the file is missing, cannot be decoded or is too large
    """
    try:
        return await asyncio.to_thread(_read_image, Path(path))
    except (OSError, Image.DecompressionBombError) as e:
        raise AssetLoadError(str(path), str(e) or type(e).__name__) from e
