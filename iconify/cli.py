"""
Command-line entry point.

Usage: iconify [default image] [-16,32 override.png] [-o output.ico]

Creates an ICO with every size in config.ICON_SIZES embedded as PNG.
Any error prints a one-line message and exits with -1.
"""

import sys

from .bitmaps import build_icon_images
from .config import HELP, ICON_SIZES
from .errors import IconifyError
from .ico import write_ico
from .options import default_path, describe, output_path, parse_args


def convert(options):
    """Build every icon size from options and write the ICO. Returns the output path."""
    default_path(options)
    out = output_path(options)

    for line in describe(options):
        print(line)

    images = build_icon_images(options, ICON_SIZES)
    try:
        written = write_ico(images, out)
    except OSError as e:
        raise IconifyError(f"Error: could not write {out}: {e.strerror or e}") from e

    print(f"\nCreated: {out} ({written} bytes)")
    print(f"  {len(images)} sizes embedded: {', '.join(f'{s}x{s}' for s in ICON_SIZES)}")
    return out


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print(HELP)
        return -1
    if len(argv) == 1 and argv[0] in ("-h", "--help"):
        print(HELP)
        return 0

    try:
        convert(parse_args(argv))
    except IconifyError as e:
        print(e)
        return -1
    return 0


def run():
    sys.exit(main())
