"""
Загружает PNG/JPG → BackgroundImage для цветовой модели.
"""

from pathlib import Path
from PIL import Image
import numpy as np
from gravlens.renderer.background import BackgroundImage
from gravlens.utils.logger import logger


def load_background(path: str) -> BackgroundImage:
    """
    Загружает изображение через Pillow и переводит его в RGBA8.
    Возвращаемый объект можно сразу передать в
    ``HostBridge.set_background_image``.
    """
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise FileNotFoundError(f"Background image not found: {p}")

    with Image.open(p) as src:
        img = src.convert("RGBA")
    w, h = img.size
    data = np.array(img, dtype=np.uint8).tobytes()

    logger.debug(f"[TextureLoader] Loaded background {p} ({w}x{h})")
    return BackgroundImage(w, h, data)
