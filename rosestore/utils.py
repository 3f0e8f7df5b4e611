"""File-system and number-formatting helpers."""

from __future__ import annotations

import math
import os
import shutil
import stat
from decimal import Decimal
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def exists(path: PathLike) -> bool:
    """Return True if a file or directory exists at *path*."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def copy_dir(src: PathLike, dst: PathLike) -> None:
    """Recursively copy the directory *src* to *dst*, keeping permissions."""
    src_mode = stat.S_IMODE(os.stat(src).st_mode)
    os.makedirs(dst, mode=src_mode, exist_ok=True)
    with os.scandir(src) as entries:
        for entry in entries:
            target = Path(dst) / entry.name
            if entry.is_dir():
                copy_dir(entry.path, target)
            else:
                copy_file(entry.path, target)


def copy_file(src: PathLike, dst: PathLike) -> None:
    """Copy the contents of *src* to *dst* and apply the source's mode."""
    shutil.copyfile(src, dst)
    shutil.copymode(src, dst)


def float_to_str(val: float) -> str:
    """Format *val* in plain decimal notation with the fewest digits that round-trip."""
    if math.isnan(val):
        return "NaN"
    if math.isinf(val):
        return "+Inf" if val > 0 else "-Inf"
    return format(Decimal(repr(val)).normalize(), "f")


def str_to_float(val: str) -> float:
    """Parse *val* as a float, raising ValueError on malformed or out-of-range input."""
    if not val or val != val.strip() or "_" in val:
        raise ValueError(f"invalid float: {val!r}")
    if val.lstrip("+-").lower().startswith("0x"):
        return float.fromhex(val)
    result = float(val)
    if math.isinf(result) and "inf" not in val.lower():
        raise ValueError(f"float out of range: {val!r}")
    return result