#
# PROJECT: braille-cli-graphics
# MODULE: braille_cli_graphics/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging
import time

from .bitmap import load_bitmap
from .config import RenderConfig
from .errors import DecodeFailure
from .rasterizer import draw_bitmap, draw_curve, draw_line, draw_rect
from .renderer import Renderer, TEARDOWN
from .surface import Surface

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Animated demo: two breathing parabolas, a bitmap, three boxes and two
    lines, redrawn every frame until 'q' is pressed.

    curses owns terminal mode and key polling; frames bypass curses and
    are written to stdout as raw braille byte streams.
    """

    def __init__(self, stdscr, config: RenderConfig):
        self.stdscr = stdscr
        self.config = config
        self.running = True

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        if not config.supports_utf8:
            logger.warning("Locale does not advertise UTF-8; braille may not display")

        th, tw = stdscr.getmaxyx()
        self.surface = Surface(tw, th)
        self.renderer = Renderer()
        logger.info("Surface %dx%d cells (%dx%d dots)", tw, th,
                    self.surface.pixel_width, self.surface.pixel_height)

        self.bitmap = None
        if config.bitmap_path:
            try:
                self.bitmap = load_bitmap(config.bitmap_path)
            except DecodeFailure as e:
                logger.warning("Continuing without bitmap: %s", e)

        self.amplitude = config.curve_amplitude
        self.rate = config.curve_rate

    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == ord('q'):
            self.running = False

    def draw_frame(self):
        s = self.surface
        s.clear()

        draw_curve(s, 0, 80, self.amplitude, 10, 87)
        draw_curve(s, 0, 80, -self.amplitude, 10, 1000)
        if self.bitmap is not None:
            draw_bitmap(s, self.bitmap, 85, 0)
        draw_rect(s, 200, 100, 20, 20, fill=True)
        draw_rect(s, 250, 50, 20, 20, fill=True)
        draw_rect(s, 300, 10, 20, 20, fill=True)
        draw_line(s, 200, 150, 280, 150)
        draw_line(s, 200, 150, 280, 100)

    def step_animation(self):
        self.amplitude += self.rate
        if abs(self.amplitude) > self.config.amplitude_limit:
            self.rate = -self.rate

    def run(self, stream=None):
        try:
            while self.running:
                self.handle_input()
                if not self.running:
                    break
                time.sleep(self.config.frame_delay)
                self.draw_frame()
                self.renderer.present(self.surface, stream)
                self.step_animation()
        finally:
            out = stream if stream is not None else self.renderer.default_stream()
            out.write(TEARDOWN)
            out.flush()


def main(stdscr, config: RenderConfig):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config)
    app.run()
