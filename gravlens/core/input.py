"""
Скрывает GLFW‑callback‑механику.

Перетаскивание мышью считается только пока зажата левая кнопка
(модификатор вращения); клавиши копятся как «нажатия» и забираются
через ``consume_presses``.
"""

import glfw


class InputManager:
    """Скрывает GLFW‑callback‑механику."""
    def __init__(self, window):
        self.window = window
        self.pressed = []
        self.mouse = {"dx": 0.0, "dy": 0.0, "x": None, "y": None}
        self.dragging = False
        self._setup_callbacks()

    def _setup_callbacks(self):
        glfw.set_key_callback(self.window, self._key_cb)
        glfw.set_cursor_pos_callback(self.window, self._mouse_move_cb)
        glfw.set_mouse_button_callback(self.window, self._mouse_button_cb)

    def _key_cb(self, win, key, scancode, action, mods):
        if action == glfw.PRESS:
            self.pressed.append(key)

    def _mouse_button_cb(self, win, button, action, mods):
        if button == glfw.MOUSE_BUTTON_LEFT:
            self.dragging = action == glfw.PRESS

    def _mouse_move_cb(self, win, xpos, ypos):
        if self.dragging and self.mouse["x"] is not None:
            self.mouse["dx"] += xpos - self.mouse["x"]
            self.mouse["dy"] += ypos - self.mouse["y"]
        self.mouse["x"], self.mouse["y"] = xpos, ypos

    def consume_presses(self):
        keys, self.pressed = self.pressed, []
        return keys

    def get_drag_delta(self):
        dx, dy = self.mouse["dx"], self.mouse["dy"]
        self.mouse["dx"], self.mouse["dy"] = 0.0, 0.0
        return dx, dy
