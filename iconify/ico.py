"""
ICO container encoder.

Layout of the produced file:

    ICONDIR        reserved (2), type=1 (2), count (2)
    ICONDIRENTRY   width (1), height (1), colors=0 (1), reserved=0 (1),
                   planes=1 (2), bpp (2), size (4), offset (4)      x count
    image data     PNG payloads, concatenated in entry order, no padding

Width and height are single bytes, so 256 is stored as 0.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .config import ICO_BYTE_ORDER

ICO_TYPE_ICON = 1
ICO_HEADER_SIZE = 6
ICO_ENTRY_SIZE = 16

_HEADER = struct.Struct(ICO_BYTE_ORDER + "HHH")
_ENTRY = struct.Struct(ICO_BYTE_ORDER + "BBBBHHII")


@dataclass(frozen=True)
class IconImage:
    """One image to embed: its dimensions, bit depth and encoded PNG bytes."""
    width: int
    height: int
    bits_per_pixel: int
    payload: bytes


@dataclass(frozen=True)
class IconDirEntry:
    width: int           # as stored, 0 means 256
    height: int
    color_count: int
    reserved: int
    planes: int
    bits_per_pixel: int
    size: int
    offset: int


def dimension_byte(value: int) -> int:
    """Encode a width or height for the directory (256 -> 0)."""
    if value == 256:
        return 0
    if not 1 <= value <= 255:
        raise ValueError(f"Icon dimension {value} is outside 1..256")
    return value


def build_directory(images: Sequence[IconImage]) -> List[IconDirEntry]:
    """
    Compute the directory entries for images, in the order given.

    The first payload starts right after the last entry; every following
    offset is the previous offset plus the previous payload length.
    """
    if not images:
        raise ValueError("An ICO file needs at least one image")

    data_offset = ICO_HEADER_SIZE + ICO_ENTRY_SIZE * len(images)

    entries = []
    for image in images:
        size = len(image.payload)
        entries.append(IconDirEntry(
            width=dimension_byte(image.width),
            height=dimension_byte(image.height),
            color_count=0,
            reserved=0,
            planes=1,
            bits_per_pixel=image.bits_per_pixel,
            size=size,
            offset=data_offset,
        ))
        data_offset += size
    return entries


def encode_ico(images: Sequence[IconImage]) -> bytes:
    """Serialize images into a complete ICO byte string."""
    entries = build_directory(images)

    parts = [_HEADER.pack(0, ICO_TYPE_ICON, len(entries))]
    for e in entries:
        parts.append(_ENTRY.pack(
            e.width, e.height, e.color_count, e.reserved,
            e.planes, e.bits_per_pixel, e.size, e.offset,
        ))
    parts.extend(image.payload for image in images)
    return b"".join(parts)


def write_ico(images: Sequence[IconImage], output_path) -> int:
    """Encode images and write them to output_path in one write. Returns the byte count."""
    data = encode_ico(images)
    with open(output_path, "wb") as f:
        f.write(data)
    return len(data)


def read_directory(data: bytes) -> Tuple[int, List[IconDirEntry]]:
    """Parse the header and directory of an ICO byte string."""
    if len(data) < ICO_HEADER_SIZE:
        raise ValueError("Data is too short for an ICO header")

    reserved, ico_type, count = _HEADER.unpack_from(data, 0)
    if reserved != 0 or ico_type != ICO_TYPE_ICON:
        raise ValueError(f"Not an ICO header (reserved={reserved}, type={ico_type})")

    if len(data) < ICO_HEADER_SIZE + ICO_ENTRY_SIZE * count:
        raise ValueError(f"Data is too short for {count} directory entries")

    entries = [
        IconDirEntry(*_ENTRY.unpack_from(data, ICO_HEADER_SIZE + ICO_ENTRY_SIZE * i))
        for i in range(count)
    ]
    return count, entries
