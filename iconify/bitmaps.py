"""
Source images for the icon: loading, letterbox resize and PNG encoding.

Every image is converted to RGBA on load, so every embedded PNG is 32 bpp.
"""

from __future__ import annotations

import io
import os
from typing import Dict, List, Sequence, Tuple

from PIL import Image, UnidentifiedImageError

from .config import ICON_SIZES, RESAMPLE, SUPPORTED_FORMATS
from .errors import CorruptImageError, MissingFileError, UnsupportedFormatError
from .ico import IconImage
from .options import OptionKey, image_path

# Leading bytes of the supported formats that have one (TARGA has none)
SIGNATURES = (
    b"\x89PNG\r\n\x1a\n",
    b"\xff\xd8\xff",
    b"GIF87a",
    b"GIF89a",
    b"BM",
)


def has_known_signature(path: str) -> bool:
    with open(path, "rb") as f:
        head = f.read(8)
    return head.startswith(SIGNATURES)


def load_image(path: str) -> Image.Image:
    """Load and fully decode an image file as RGBA."""
    if not os.path.isfile(path):
        raise MissingFileError(f"Input image '{path}' not found!")

    try:
        with Image.open(path, formats=SUPPORTED_FORMATS) as img:
            img.load()
            return img.convert("RGBA")
    except UnidentifiedImageError as e:
        # Pillow also reports a recognised file with a broken header this way
        if has_known_signature(path):
            raise CorruptImageError(f"An error occurred reading an image: {path}: {e}") from e
        raise UnsupportedFormatError(
            "Only JPEG, PNG, BMP, GIF, and TARGA image formats are supported."
        ) from None
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise CorruptImageError(f"An error occurred reading an image: {path}: {e}") from e


def letterbox_offset(width: int, height: int) -> Tuple[int, int]:
    """Where the source goes on its max(width, height) square canvas."""
    if height > width:
        return (height - width) // 2, 0
    return 0, (width - height) // 2


def letterbox(image: Image.Image, size: int) -> Image.Image:
    """Center image on a transparent square canvas and scale it to size x size."""
    if size <= 0:
        raise ValueError(f"Icon size must be positive, got {size}")

    if image.mode != "RGBA":
        image = image.convert("RGBA")

    width, height = image.size
    side = max(width, height)
    canvas = Image.new("RGBA", (side, side), (0, 0, 0, 0))
    canvas.alpha_composite(image, dest=letterbox_offset(width, height))

    if side == size:
        return canvas
    return canvas.resize((size, size), RESAMPLE)


def encode_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def bits_per_pixel(image: Image.Image) -> int:
    return len(image.getbands()) * 8


def icon_image(image: Image.Image, size: int) -> IconImage:
    """Letterbox image to size and encode it as an embeddable PNG."""
    resized = letterbox(image, size)
    return IconImage(
        width=resized.width,
        height=resized.height,
        bits_per_pixel=bits_per_pixel(resized),
        payload=encode_png(resized),
    )


def build_icon_images(options: Dict[OptionKey, str], sizes: Sequence[int] = ICON_SIZES) -> List[IconImage]:
    """One IconImage per size, in the order of sizes."""
    images = []
    for size in sizes:
        path = image_path(options, size)
        src = load_image(path)
        try:
            entry = icon_image(src, size)
        finally:
            src.close()
        images.append(entry)
        print(f"  Created {size}x{size} from {path}: {len(entry.payload)} bytes")
    return images
