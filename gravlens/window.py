"""
Окно + GLFW‑контекст OpenGL.
"""

import glfw
from gravlens.core.input import InputManager


class Window:
    """Окно + GLFW‑контекст; ошибка создания – RuntimeError."""
    def __init__(self, width: int = 1000, height: int = 600, title: str = "gravlens"):
        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")

        self.handle = glfw.create_window(width, height, title, None, None)
        if not self.handle:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")
        glfw.make_context_current(self.handle)

        self.input = InputManager(self.handle)

        self.set_vsync(True)

    def framebuffer_size(self):
        return glfw.get_framebuffer_size(self.handle)

    def set_vsync(self, enable: bool = True):
        glfw.swap_interval(1 if enable else 0)

    def set_title(self, text: str):
        glfw.set_window_title(self.handle, text)

    def should_close(self) -> bool:
        return glfw.window_should_close(self.handle)

    def swap_buffers(self):
        glfw.swap_buffers(self.handle)

    def poll_events(self):
        glfw.poll_events()

    def close(self):
        glfw.set_window_should_close(self.handle, True)

    def destroy(self):
        glfw.destroy_window(self.handle)
        glfw.terminate()
