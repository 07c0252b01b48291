# -*- coding: utf-8 -*-
import json

import pytest
from PIL import Image

from gravlens.core.context import CameraOrientation, SimulationContext
from gravlens.lensing import Phase
from gravlens.utils.config import Config, DEFAULT_CONFIG


def test_drag_updates_yaw_and_clamps_pitch():
    o = CameraOrientation()
    o.apply_drag(100.0, 40.0)
    assert o.yaw == pytest.approx(-0.5)
    assert o.pitch == pytest.approx(0.2)
    o.apply_drag(0.0, 10_000.0)
    assert o.pitch == 1.5
    o.apply_drag(0.0, -20_000.0)
    assert o.pitch == -1.5


def test_bridge_progress_and_background(make_sim):
    ctx, scheduler, bridge = make_sim(width=4, height=10)
    assert bridge.progress() == (0.0, False)
    bridge.start()
    scheduler.tick(ctx)
    assert bridge.progress() == (50.0, False)
    scheduler.tick(ctx)
    assert bridge.progress() == (100.0, True)

    bridge.set_background_image(2, 1, bytes(8))
    assert ctx.color_model.background.width == 2
    bridge.clear_background_image()
    assert ctx.color_model.background is None
    with pytest.raises(ValueError):
        bridge.set_background_image(2, 2, bytes(3))


def test_context_defaults():
    ctx = SimulationContext(10, 6)
    assert (ctx.width, ctx.height) == (10, 6)
    assert ctx.params.rs == 4.0
    assert ctx.params.camera_distance == 150.0
    assert ctx.precompute.phase is Phase.IDLE


def test_config_creates_defaults(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert path.is_file()
    assert cfg["render"]["rows_per_tick"] == 5
    assert cfg["simulation"] == DEFAULT_CONFIG["simulation"]


def test_config_merges_partial_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"render": {"width": 40}, "show_fps": False}))
    cfg = Config(str(path))
    assert cfg["render"]["width"] == 40
    assert cfg["render"]["height"] == 300
    assert cfg.get("show_fps") is False


def test_config_falls_back_on_broken_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    cfg = Config(str(path))
    assert cfg["window"] == DEFAULT_CONFIG["window"]


def _small_config(tmp_path, **extra):
    data = {"render": {"width": 40, "height": 24}, "show_fps": False}
    data.update(extra)
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))
    return Config(str(path))


def test_engine_headless_tick_cycle(tmp_path):
    from gravlens.engine import Engine

    out = tmp_path / "frame.png"
    engine = Engine(_small_config(tmp_path), headless=True, output=str(out))
    # first ticks only compute, no frame
    assert engine.tick() is False
    assert engine.ctx.precompute.phase is Phase.COMPUTING
    while engine.ctx.precompute.phase is Phase.COMPUTING:
        assert engine.tick() is False
    assert not out.exists()
    assert engine.tick() is True
    assert Image.open(out).size == (40, 24)

    engine.bridge.set_field_strength(2.0)
    assert engine.tick() is False


def test_engine_background_from_config(tmp_path):
    from gravlens.engine import Engine

    img_path = tmp_path / "bg.png"
    Image.new("RGB", (8, 4), (10, 20, 30)).save(img_path)
    cfg = _small_config(tmp_path, background=str(img_path))
    engine = Engine(cfg, headless=True, output=str(tmp_path / "f.png"))
    bg = engine.ctx.color_model.background
    assert (bg.width, bg.height) == (8, 4)
    assert bg.pixels[0, 0].tolist() == [10, 20, 30, 255]
    assert engine.load_background(str(tmp_path / "missing.png")) is False
    assert engine.ctx.color_model.background is bg


def test_cli_headless(tmp_path):
    from gravlens.__main__ import main

    cfg = _small_config(tmp_path)
    out = tmp_path / "cli.png"
    code = main(["--config", str(cfg.path), "--headless", "--output", str(out),
                 "--rs", "3.0", "--yaw", "0.3"])
    assert code == 0
    assert Image.open(out).size == (40, 24)


def test_cli_reports_missing_window(tmp_path, monkeypatch):
    from gravlens import __main__ as cli
    from gravlens.engine import Engine

    def _no_window(self, w, h, title):
        raise RuntimeError("Failed to create GLFW window")

    monkeypatch.setattr(Engine, "_create_window", _no_window)
    cfg = _small_config(tmp_path)
    assert cli.main(["--config", str(cfg.path)]) == 1


def test_orientation_set_clamps_pitch():
    o = CameraOrientation()
    o.set(0.7, 5.0)
    assert (o.yaw, o.pitch) == (0.7, 1.5)
    o.set(-0.2, -3.0)
    assert (o.yaw, o.pitch) == (-0.2, -1.5)


def test_cli_clamps_pitch(tmp_path, monkeypatch):
    from gravlens import __main__ as cli
    from gravlens.engine import Engine

    seen = {}

    def _capture(self, frames=1):
        seen["orientation"] = (self.ctx.orientation.yaw, self.ctx.orientation.pitch)
        return 0

    monkeypatch.setattr(Engine, "run_headless", _capture)
    cfg = _small_config(tmp_path)
    code = cli.main(["--config", str(cfg.path), "--headless",
                     "--output", str(tmp_path / "x.png"), "--yaw", "0.3", "--pitch", "5.0"])
    assert code == 0
    assert seen["orientation"] == (0.3, 1.5)


@pytest.fixture
def input_manager(monkeypatch):
    glfw = pytest.importorskip("glfw")
    from gravlens.core.input import InputManager

    for name in ("set_key_callback", "set_cursor_pos_callback", "set_mouse_button_callback"):
        monkeypatch.setattr(glfw, name, lambda win, cb: None)
    return glfw, InputManager(window=object())


def test_drag_accumulates_only_while_left_button_held(input_manager):
    glfw, im = input_manager

    im._mouse_move_cb(None, 10.0, 10.0)
    im._mouse_move_cb(None, 30.0, 5.0)
    assert im.get_drag_delta() == (0.0, 0.0)

    im._mouse_button_cb(None, glfw.MOUSE_BUTTON_LEFT, glfw.PRESS, 0)
    im._mouse_move_cb(None, 35.0, 9.0)
    im._mouse_move_cb(None, 40.0, 4.0)
    assert im.get_drag_delta() == (10.0, -1.0)
    assert im.get_drag_delta() == (0.0, 0.0)

    im._mouse_button_cb(None, glfw.MOUSE_BUTTON_RIGHT, glfw.PRESS, 0)
    im._mouse_move_cb(None, 41.0, 4.0)
    assert im.get_drag_delta() == (1.0, 0.0)

    im._mouse_button_cb(None, glfw.MOUSE_BUTTON_LEFT, glfw.RELEASE, 0)
    im._mouse_move_cb(None, 100.0, 100.0)
    assert im.get_drag_delta() == (0.0, 0.0)


def test_key_presses_are_consumed_once(input_manager):
    glfw, im = input_manager
    im._key_cb(None, glfw.KEY_R, 0, glfw.PRESS, 0)
    im._key_cb(None, glfw.KEY_R, 0, glfw.RELEASE, 0)
    im._key_cb(None, glfw.KEY_PAGE_UP, 0, glfw.PRESS, 0)
    assert im.consume_presses() == [glfw.KEY_R, glfw.KEY_PAGE_UP]
    assert im.consume_presses() == []
