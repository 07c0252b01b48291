# gravlens/renderer/gl_presenter.py
"""
Вывод RGBA‑буфера в окно через PyOpenGL (glDrawPixels).

Буфер хранится сверху вниз, а OpenGL читает снизу вверх – поэтому
строки переворачиваются перед загрузкой.
"""

import numpy as np
from OpenGL import GL

from gravlens.renderer.base_presenter import BasePresenter
from gravlens.utils.logger import logger


def gl_check_error(context: str = ""):
    """Проверить glGetError и вывести в лог, если что‑то не так."""
    err = GL.glGetError()
    if err != GL.GL_NO_ERROR:
        logger.error(f"OpenGL error 0x{err:04x} [{context}]")


class GLPresenter(BasePresenter):
    """Рисует кадр на весь framebuffer окна."""
    def __init__(self, window):
        self.window = window
        GL.glPixelStorei(GL.GL_UNPACK_ALIGNMENT, 1)
        GL.glClearColor(0.0, 0.0, 0.0, 1.0)

    def present(self, buffer) -> None:
        fb_w, fb_h = self.window.framebuffer_size()
        GL.glViewport(0, 0, fb_w, fb_h)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT)

        GL.glRasterPos2f(-1.0, -1.0)
        GL.glPixelZoom(fb_w / buffer.width, fb_h / buffer.height)
        data = np.ascontiguousarray(np.flipud(buffer.array))
        GL.glDrawPixels(buffer.width, buffer.height,
                        GL.GL_RGBA, GL.GL_UNSIGNED_BYTE, data)
        gl_check_error("present")
        self.window.swap_buffers()

    def clear(self) -> None:
        GL.glClear(GL.GL_COLOR_BUFFER_BIT)
        self.window.swap_buffers()
