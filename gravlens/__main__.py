"""
Точка входа: ``python -m gravlens``.
"""

import argparse
import sys

from gravlens.utils import logger, Config


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="gravlens",
        description="Gravitational lensing around a simulated black hole.",
    )
    p.add_argument("--config", default="config.json", help="path to JSON config")
    p.add_argument("--rs", type=float, help="field-strength radius")
    p.add_argument("--distance", type=float, help="camera distance")
    p.add_argument("--background", help="background image (PNG/JPG)")
    p.add_argument("--headless", action="store_true",
                   help="no window: precompute, render one frame to --output")
    p.add_argument("--output", default="frame.png", help="PNG path for --headless")
    p.add_argument("--yaw", type=float, default=0.0, help="headless camera yaw (rad)")
    p.add_argument("--pitch", type=float, default=0.0, help="headless camera pitch (rad)")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    cfg = Config(args.config)

    from gravlens.engine import Engine
    try:
        engine = Engine(cfg, headless=args.headless, output=args.output)
    except RuntimeError as exc:
        logger.error(f"[Main] Cannot create rendering surface: {exc}")
        return 1

    if args.rs is not None:
        engine.bridge.set_field_strength(args.rs)
    if args.distance is not None:
        engine.bridge.set_camera_distance(args.distance)
    if args.background:
        engine.load_background(args.background)

    if args.headless:
        engine.ctx.orientation.set(args.yaw, args.pitch)
        engine.run_headless()
    else:
        engine.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
