# gravlens/engine.py
# -*- coding: utf-8 -*-
"""
Главный цикл приложения.

* Собирает контекст симуляции, планировщик, компоновщик и мост к хосту.
* Один ``tick`` – это либо один шаг предвычисления (пока карта
  считается), либо один проход компоновщика (когда карта готова),
  но никогда не оба сразу.
* Оконный режим: glfw + PyOpenGL, индикатор загрузки – заголовок окна.
  Headless‑режим: кадр сохраняется в PNG.
"""
import time

from gravlens.core.context import SimulationContext, HostBridge
from gravlens.core.timer import Timer
from gravlens.lensing import (
    PinholeCamera, DistortionPrecomputer, PrecomputeScheduler,
    SimulationParameters, Phase,
)
from gravlens.renderer import FrameCompositor, PixelBuffer, ImagePresenter
from gravlens.utils import logger, Config
from gravlens.utils.texture_loader import load_background

RS_FACTOR = 1.25
DISTANCE_STEP = 10.0
MIN_DISTANCE = 20.0


class Engine:
    """
    Главный цикл приложения.
    """
    # -----------------------------------------------------------------
    def __init__(self, config: Config = None, headless: bool = False,
                 output: str = "frame.png"):
        # ---------------------------------------------------------
        # 0️⃣  Конфиг
        # ---------------------------------------------------------
        self.cfg = config if config is not None else Config()
        render = self.cfg["render"]
        sim = self.cfg["simulation"]
        width, height = int(render["width"]), int(render["height"])

        # ---------------------------------------------------------
        # 1️⃣  Контекст + предвычисление + компоновщик
        # ---------------------------------------------------------
        camera = PinholeCamera(render["screen_distance"], render["screen_width"])
        self.ctx = SimulationContext(
            width, height,
            SimulationParameters(float(sim["rs"]), float(sim["camera_distance"])),
        )
        precomputer = DistortionPrecomputer(width, height, camera, render["max_steps"])
        self.scheduler = PrecomputeScheduler(
            precomputer, render["rows_per_tick"], observer=self._on_progress
        )
        self.bridge = HostBridge(self.ctx, self.scheduler)
        self.compositor = FrameCompositor(width, height, camera)
        self.buffer = PixelBuffer(width, height)

        background = self.cfg.get("background")
        if background:
            self.load_background(background)

        # ---------------------------------------------------------
        # 2️⃣  Окно / презентер
        # ---------------------------------------------------------
        if headless:
            self.window = None
            self.presenter = ImagePresenter(output)
        else:
            win_cfg = self.cfg["window"]
            self.window = self._create_window(
                win_cfg.get("width", 1000),
                win_cfg.get("height", 600),
                win_cfg.get("title", "gravlens"),
            )
            from gravlens.renderer.gl_presenter import GLPresenter
            self.presenter = GLPresenter(self.window)

        self.timer = Timer()
        self._last_fps_print = time.time()
        self.show_fps = bool(self.cfg.get("show_fps", True))
        self._last_logged_decile = -1

    # -----------------------------------------------------------------
    def _create_window(self, w: int, h: int, title: str):
        from gravlens.window import Window
        return Window(w, h, title)

    # -----------------------------------------------------------------
    def load_background(self, path: str) -> bool:
        """Загрузить фон из файла; при ошибке остаётся текущий фон."""
        try:
            image = load_background(path)
        except (OSError, ValueError) as exc:
            logger.error(f"[Engine] Cannot load background {path}: {exc}")
            return False
        self.bridge.set_background_image(image.width, image.height, image.rgba)
        return True

    # -----------------------------------------------------------------
    def _on_progress(self, percentage: float, ready: bool):
        decile = int(percentage // 10)
        if decile != self._last_logged_decile:
            logger.debug(f"[Engine] Precompute {percentage:.0f}%")
            self._last_logged_decile = decile
        if ready:
            self._last_logged_decile = -1
        if self.window is not None:
            title = self.cfg["window"].get("title", "gravlens")
            status = "Ready" if ready else f"Calculating... {percentage:.0f}%"
            self.window.set_title(f"{title} – {status}")

    # -----------------------------------------------------------------
    def tick(self) -> bool:
        """Один шаг; True, если был собран и показан кадр."""
        if self.ctx.precompute.phase is Phase.IDLE:
            self.bridge.start()

        if self.ctx.precompute.phase is Phase.COMPUTING:
            self.scheduler.tick(self.ctx)
            self.presenter.clear()
            return False

        if self.compositor.compose(self.ctx, self.buffer):
            self.presenter.present(self.buffer)
            return True
        return False

    # -----------------------------------------------------------------
    def run_headless(self, frames: int = 1) -> int:
        """Досчитать карту и отрисовать ``frames`` кадров."""
        if self.ctx.precompute.phase is not Phase.COMPUTING:
            self.bridge.start()
        ticks = self.scheduler.run_to_completion(self.ctx)
        logger.info(f"[Engine] Precompute done in {ticks} ticks")
        rendered = 0
        for _ in range(frames):
            rendered += int(self.tick())
        return rendered

    # -----------------------------------------------------------------
    def run(self):
        """Главный цикл оконного режима."""
        logger.info("[Engine] Engine started")
        while not self.window.should_close():
            self.timer.tick()
            self.window.poll_events()
            self._handle_input()
            self.tick()

            if self.show_fps:
                now = time.time()
                if now - self._last_fps_print >= 1.0:
                    logger.info(f"[Engine] FPS: {self.timer.fps:.2f}")
                    self._last_fps_print = now

        self.shutdown()

    # -----------------------------------------------------------------
    def _handle_input(self):
        import glfw

        im = self.window.input
        dx, dy = im.get_drag_delta()
        if dx or dy:
            self.bridge.on_pointer_drag(dx, dy)

        params = self.ctx.params
        for key in im.consume_presses():
            if key in (glfw.KEY_EQUAL, glfw.KEY_KP_ADD):
                self.bridge.set_field_strength(params.rs * RS_FACTOR)
            elif key in (glfw.KEY_MINUS, glfw.KEY_KP_SUBTRACT):
                self.bridge.set_field_strength(params.rs / RS_FACTOR)
            elif key == glfw.KEY_PAGE_UP:
                self.bridge.set_camera_distance(params.camera_distance + DISTANCE_STEP)
            elif key == glfw.KEY_PAGE_DOWN:
                self.bridge.set_camera_distance(
                    max(MIN_DISTANCE, params.camera_distance - DISTANCE_STEP)
                )
            elif key == glfw.KEY_R:
                self.bridge.reset_orientation()
            elif key == glfw.KEY_ESCAPE:
                self.window.close()
            params = self.ctx.params

    # -----------------------------------------------------------------
    def shutdown(self):
        """Освободить ресурсы и закрыть окно."""
        logger.info("[Engine] Shutting down")
        self.presenter.close()
        if self.window is not None:
            self.window.destroy()
