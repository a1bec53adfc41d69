"""Nothing To Square -- pygame host for the unfold animation.

Exercises unfold and unfold-render.

Controls:
  Click / Space   Advance one node (ignored while animating)
  R               Reset to the first node, everything folded
  Esc             Quit

Run: python main.py [--nodes N]
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from unfold import Driver, FoldConfig, Frame, NodeChain, Sequencer
from unfold_render import Viewport, render_frame

SCREEN_W = 480
SCREEN_H = 800
FPS = 60


class HostState:
    """Holds the animation objects and the latest frame to draw."""

    def __init__(self, config: FoldConfig) -> None:
        self.config = config
        self.sequencer = Sequencer(NodeChain(config))
        # pygame's clock paces the loop, the driver never sleeps itself.
        self.driver = Driver(self.sequencer, sleep=lambda seconds: None)
        self.frame: Frame = self.driver.frame()
        self.driver.on_frame(self._on_frame)

    def _on_frame(self, frame: Frame) -> None:
        self.frame = frame

    def reset(self) -> None:
        if self.driver.active:
            return
        self.sequencer.reset()
        self.frame = self.driver.frame()


def draw(screen: pygame.Surface, state: HostState) -> None:
    viewport = Viewport(*screen.get_size())
    scene = render_frame(state.frame, viewport, state.config)
    screen.fill(scene.background)
    width = max(1, round(scene.stroke_width))
    for seg in scene.segments:
        pygame.draw.line(
            screen, scene.color, (seg.x0, seg.y0), (seg.x1, seg.y1), width,
        )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--nodes", type=int, default=5)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    state = HostState(FoldConfig(nodes=args.nodes))

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Nothing To Square -- unfold demo")
    clock = pygame.time.Clock()

    tick_interval = state.driver.clock.interval
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.driver.activate()
                elif event.key == pygame.K_r:
                    state.reset()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                state.driver.activate()

        # --- Tick ---
        if not state.driver.active:
            accumulator = 0.0
        while state.driver.active and accumulator >= tick_interval:
            state.driver.tick()
            accumulator -= tick_interval

        # --- Render ---
        draw(screen, state)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
