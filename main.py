import argparse
import random

import pygame

import config
from field import ParticleField
from renderer import PygameSurface


class ParticleBackground:
    """
    Window host for the particle field.
    Ticks the field once per frame, then renders it onto the display.
    """
    def __init__(self, width=None, height=None, density=None, max_line_length=None, fps=None, seed=None):
        pygame.init()

        self.width = width if width is not None else config.WINDOW_WIDTH
        self.height = height if height is not None else config.WINDOW_HEIGHT
        self.fps = fps if fps is not None else config.FPS
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption(config.WINDOW_TITLE)
        self.surface = PygameSurface(self.screen)

        self.field = ParticleField(
            self.width,
            self.height,
            density=density,
            max_line_length=max_line_length,
            rng=random.Random(seed)
        )

        # Clock for consistent frame rate
        self.clock = pygame.time.Clock()
        self.running = True

    def handle_events(self):
        """Handle window events. Only closing and resizing are supported."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == config.KEY_EXIT:
                    self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.width, self.height = max(1, event.w), max(1, event.h)
                self.field.resize(self.width, self.height)
                # The display surface is recreated on resize
                self.screen = pygame.display.get_surface()
                self.surface = PygameSurface(self.screen)

    def update(self):
        """Advance the simulation by one tick."""
        self.field.step()

    def render(self):
        """Render the entire field."""
        self.screen.fill(config.BACKGROUND_COLOR)
        self.field.render(self.surface)
        pygame.display.flip()

    def run(self):
        """Main loop."""
        try:
            while self.running:
                self.clock.tick(self.fps)

                self.handle_events()
                self.update()
                self.render()
        finally:
            pygame.quit()


def main():
    parser = argparse.ArgumentParser(description="Animated particle background: drifting dots connected by lines.")
    parser.add_argument("--width", type=int, default=config.WINDOW_WIDTH, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=config.WINDOW_HEIGHT, help="Window height in pixels")
    parser.add_argument("--density", type=int, default=config.DENSITY, help="Particles per 100,000 px^2")
    parser.add_argument("--max-line-length", type=float, default=config.MAX_LINE_LENGTH, help="Max distance for connecting lines (0 disables lines)")
    parser.add_argument("--fps", type=int, default=config.FPS, help="Target FPS")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible field")
    args = parser.parse_args()

    background = ParticleBackground(
        width=args.width,
        height=args.height,
        density=args.density,
        max_line_length=args.max_line_length,
        fps=args.fps,
        seed=args.seed
    )
    print(f"{config.WINDOW_TITLE}: {len(background.field)} particles on {args.width}x{args.height}")
    background.run()


if __name__ == "__main__":
    main()
