"""
gamekit easing preview - watch every easing shape play side by side.

Usage:
    python main.py [--loop <mode>] [--duration <sec>] [--time-scale <x>] [--seconds <sec>]

Loop modes:
    none            - play once and hold the end value
    reset           - restart from the start value every pass
    ping_pong       - reverse direction every pass (default)
    ping_pong_once  - reverse once, then finish
"""
import argparse

import pygame

from config import (
    COLOR_BG,
    DETERMINISTIC_SIM,
    EASING_DEFAULT_DURATION,
    FPS,
    PREVIEW_TITLE,
    SIM_TICK_HZ,
    TIME_SCALE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from gamekit.graphics.curve_preview import CurvePreview
from gamekit.graphics.easing import LoopBehavior
from gamekit.sim.prandom import configure_from_config
from gamekit.sim.timebase import GameClock, set_clock

LOOP_CHOICES = {
    "none": LoopBehavior.NO_LOOP,
    "reset": LoopBehavior.RESET,
    "ping_pong": LoopBehavior.PING_PONG,
    "ping_pong_once": LoopBehavior.PING_PONG_ONCE,
}


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="gamekit easing preview")
    parser.add_argument(
        "--loop",
        type=str,
        default="ping_pong",
        choices=sorted(LOOP_CHOICES),
        help="Loop behavior applied to every easing (default: ping_pong)",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=EASING_DEFAULT_DURATION,
        help="Seconds per forward pass",
    )
    parser.add_argument("--time-scale", type=float, default=TIME_SCALE, help="Scaled clock multiplier")
    parser.add_argument(
        "--seconds",
        type=float,
        default=0.0,
        help="Quit automatically after this many unscaled seconds (0 = run until closed)",
    )
    args = parser.parse_args(argv)
    if not args.duration > 0:
        parser.error("--duration must be > 0")
    if args.time_scale < 0:
        parser.error("--time-scale must be >= 0")
    return args


def run(args) -> int:
    pygame.init()
    pygame.font.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption(PREVIEW_TITLE)

    configure_from_config()

    clock = GameClock(time_scale=args.time_scale)
    set_clock(clock)
    frame_clock = pygame.time.Clock()

    preview = CurvePreview((WINDOW_WIDTH, WINDOW_HEIGHT), clock, loop_type=LOOP_CHOICES[args.loop], duration=args.duration)
    preview.begin()

    running = True
    while running:
        if DETERMINISTIC_SIM:
            # Keep realtime pacing, but do not use wall-clock delta for the clock.
            frame_clock.tick(FPS)
            dt = 1.0 / max(1, int(SIM_TICK_HZ))
        else:
            dt = frame_clock.tick(FPS) / 1000.0
        clock.tick(dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    preview.set_paused(not preview.paused)
                elif event.key == pygame.K_r:
                    preview.restart()

        preview.update()

        screen.fill(COLOR_BG)
        preview.render(screen)
        pygame.display.flip()

        if args.seconds > 0 and clock.current_time(scaled=False) >= args.seconds:
            running = False

    pygame.quit()
    return 0


def main():
    """Main entry point."""
    args = parse_args()

    print("=" * 50)
    print("  gamekit - easing preview")
    print("=" * 50)
    print()
    print("Controls:")
    print("  Space     - Pause / resume")
    print("  R         - Restart all easings")
    print("  Esc       - Quit")
    print()

    rc = run(args)
    print("Bye!")
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
