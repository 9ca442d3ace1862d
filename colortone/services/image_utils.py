from __future__ import annotations
from pathlib import Path
from typing import Optional, Union

import numpy as np
import cv2

SUPPORTED_EXTS = (".png", ".jpg", ".jpeg", ".webp", ".bmp")

def bytes_to_cv2(b: bytes) -> Optional[np.ndarray]:
    # IMREAD_UNCHANGED keeps grayscale/BGRA as-is; None when the bytes don't decode
    arr = np.asarray(bytearray(b), dtype=np.uint8)
    if arr.size == 0:
        return None
    img = cv2.imdecode(arr, cv2.IMREAD_UNCHANGED)
    return img

def resolve_asset(assets_dir: Union[str, Path], name: str) -> Optional[Path]:
    base = Path(assets_dir)
    exact = base / name
    if exact.is_file():
        return exact
    for ext in SUPPORTED_EXTS:
        candidate = base / f"{name}{ext}"
        if candidate.is_file():
            return candidate
    return None

def load_asset(path: Union[str, Path]) -> Optional[np.ndarray]:
    with open(path, "rb") as f:
        return bytes_to_cv2(f.read())
