"""
Headless‑презентер: сохраняет кадр в PNG через Pillow.
"""

from pathlib import Path

from gravlens.renderer.base_presenter import BasePresenter
from gravlens.utils.logger import logger


class ImagePresenter(BasePresenter):
    """Пишет последний показанный кадр в файл."""
    def __init__(self, path: str):
        self.path = Path(path)
        self.frames = 0

    def present(self, buffer) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        buffer.to_image().save(self.path)
        self.frames += 1
        logger.info(f"[ImagePresenter] Saved frame to {self.path}")

    def clear(self) -> None:
        pass
