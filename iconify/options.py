"""
Command-line option resolver.

Tokens are read left to right and each one is matched against these rules,
first match wins:

    -o PATH, --output PATH    output file
    -d PATH, --default PATH   default image, used for every size without an override
    -N[,M,...] PATH           image to use for sizes N, M, ... (e.g. -16,32 small.png)
    PATH                      anything else is taken as the default image

A size override token is a dash, a digit, then only digits and commas.
Every option may be given only once; a size may be overridden only once.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, List, NamedTuple, Optional, Set

from .config import ICON_SIZES, OUTPUT_EXTENSION
from .errors import ArgumentError, UsageError


class OptionKey(NamedTuple):
    kind: str
    size: Optional[int] = None


DEFAULT = OptionKey("default")
OUTPUT = OptionKey("output")

OUTPUT_FLAGS = ("-o", "--output")
DEFAULT_FLAGS = ("-d", "--default")


def specific(size: int) -> OptionKey:
    return OptionKey("specific", size)


def is_size_override(token: str) -> bool:
    """True for tokens like -16 or -16,32,256."""
    if len(token) < 2 or token[0] != "-" or not token[1].isdigit():
        return False
    return all(c.isdigit() or c == "," for c in token[2:])


def parse_sizes(token: str, seen: Set[int]) -> List[int]:
    """Parse the sizes of an override token, adding each one to seen."""
    sizes = []
    for part in token[1:].split(","):
        try:
            size = int(part)
        except ValueError:
            raise ArgumentError(f"Given size override '{part}' is not a supported icon size.") from None
        if size in seen:
            raise ArgumentError(f"Size override '{size}' was given more than once.")
        if size not in ICON_SIZES:
            raise ArgumentError(f"Given size override '{size}' is not a supported icon size.")
        seen.add(size)
        sizes.append(size)
    return sizes


def _bind(options: Dict[OptionKey, str], key: OptionKey, path: str):
    if key in options:
        if key == DEFAULT:
            raise ArgumentError(f"Default image was given more than once ('{options[key]}' and '{path}').")
        raise ArgumentError(f"Output file was given more than once ('{options[key]}' and '{path}').")
    options[key] = path


def parse_args(tokens: Iterable[str]) -> Dict[OptionKey, str]:
    """Resolve argument tokens into a mapping of OptionKey -> path."""
    tokens = list(tokens)
    options = {}
    seen_sizes = set()

    i = 0
    while i < len(tokens):
        token = tokens[i]
        has_value = i + 1 < len(tokens)

        if has_value and token in OUTPUT_FLAGS:
            _bind(options, OUTPUT, tokens[i + 1])
            i += 2
        elif has_value and token in DEFAULT_FLAGS:
            _bind(options, DEFAULT, tokens[i + 1])
            i += 2
        elif has_value and is_size_override(token):
            path = tokens[i + 1]
            for size in parse_sizes(token, seen_sizes):
                options[specific(size)] = path
            i += 2
        else:
            _bind(options, DEFAULT, token)
            i += 1

    return options


def default_path(options: Dict[OptionKey, str]) -> str:
    try:
        return options[DEFAULT]
    except KeyError:
        raise UsageError("An output file name or default image file must be specified.") from None


def output_path(options: Dict[OptionKey, str]) -> str:
    """Explicit output path, or the default image path with an .ico extension."""
    if OUTPUT in options:
        return options[OUTPUT]
    root, _ext = os.path.splitext(default_path(options))
    return root + OUTPUT_EXTENSION


def image_path(options: Dict[OptionKey, str], size: int) -> str:
    """Image to use for one icon size: its override if given, else the default."""
    key = specific(size)
    if key in options:
        return options[key]
    return default_path(options)


def describe(options: Dict[OptionKey, str]) -> List[str]:
    lines = []
    if DEFAULT in options:
        lines.append(f"Default: {options[DEFAULT]}")
    if OUTPUT in options:
        lines.append(f"Output: {options[OUTPUT]}")
    for key in sorted(k for k in options if k.kind == "specific"):
        lines.append(f"Size {key.size}: {options[key]}")
    return lines
