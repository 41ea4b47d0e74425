"""
iconify - convert an image or set of images to a multi-size Windows ICO file.
"""

__version__ = "1.0.0"
