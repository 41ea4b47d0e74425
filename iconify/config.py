"""
Configuration for iconify.

Edit the block below to change which sizes end up in the icon or how the
source images are scaled. Nothing here is read from the environment.
"""

from PIL import Image

# =============================================================================
# Configuration
# =============================================================================
ICON_SIZES = (16, 32, 48, 256)    # Embedded sizes, in directory order

# Pillow format ids accepted when decoding source images
SUPPORTED_FORMATS = ("JPEG", "PNG", "BMP", "GIF", "TGA")

RESAMPLE = Image.Resampling.LANCZOS  # Filter used when scaling to icon size
ICO_BYTE_ORDER = "<"                 # ICO is little-endian
OUTPUT_EXTENSION = ".ico"
# =============================================================================

HELP = """Convert an image or set of images to a Windows ICO image.
Usage:
    iconify -d? [default image] (-[sizes,] [size-specific override])* (-o [output file])?
Examples:
    iconify example.png
    iconify example.png -16 example16px.bmp -o ../out.ico
Options:
    --default, -d : Explicitly specify a default image to use for sizes.
    --output, -o : Explicitly specify an output path. If omitted, inferred from default image.
    -[size] : Specify an image to use instead of the default at a particular size.
Supported sizes: {sizes}""".format(sizes=", ".join(str(s) for s in ICON_SIZES))
