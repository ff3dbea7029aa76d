import os
import argparse
import pygame
import config
from chaos import WorldConfig, circle_parameters, create_state, generate_points, make_rng

VERTEX_NAMES = ("top", "right", "left")


class ChaosGameSimulation:
    """
    Window, canvas and frame loop for the chaos game.
    The circle and triangle are drawn once onto a persistent canvas; every
    frame adds a batch of new points to it and flushes it to the screen.
    """
    def __init__(self, width=None, height=None, margin=None, points_per_flush=None,
                 seed=None, rng=None, headless=False):
        if headless:
            # Use dummy video driver so pygame doesn't try to open a window
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        pygame.init()

        overrides = {}
        if width is not None:
            overrides["width"] = width
        if height is not None:
            overrides["height"] = height
        if margin is not None:
            overrides["margin"] = margin
        if points_per_flush is not None:
            overrides["points_per_flush"] = points_per_flush
        self.state = create_state(WorldConfig.from_config(**overrides))
        self.rng = rng if rng is not None else make_rng(seed if seed is not None else config.RANDOM_SEED)

        self.width = int(self.state.world.width)
        self.height = int(self.state.world.height)
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(config.WINDOW_TITLE)

        # Persistent point surface; points are never cleared during a run
        self.canvas = pygame.Surface((self.width, self.height))
        self.draw_inscribed_triangle()

        self.show_ui = config.SHOW_UI
        self.font = pygame.font.Font(None, config.UI_FONT_SIZE)

        self.clock = pygame.time.Clock()
        self.running = True

    def to_screen(self, point):
        """Convert a y-up world point to pygame pixel coordinates."""
        x, y = point
        return x, self.height - y

    def draw_inscribed_triangle(self):
        """Draw the outer circle and the inscribed triangle onto the canvas."""
        self.canvas.fill(config.BACKGROUND_COLOR)

        center, radius, thickness = circle_parameters(self.state.world)
        pygame.draw.circle(
            self.canvas,
            config.CIRCLE_COLOR,
            self.to_screen(center),
            radius,
            max(1, int(thickness))
        )

        corners = [self.to_screen(v) for v in self.state.triangle.vertices]
        pygame.draw.polygon(self.canvas, config.TRIANGLE_COLOR, corners, config.TRIANGLE_WIDTH)

    def draw_point(self, point):
        """Draw a single orbit point as a small square."""
        x, y = self.to_screen(point)
        size = config.POINT_SIZE
        rect = pygame.Rect(int(x - size / 2), int(y - size / 2), size, size)
        pygame.draw.rect(self.canvas, config.POINT_COLOR, rect)

    def update(self):
        """Generate the next batch of points and draw them onto the canvas."""
        points = generate_points(self.state, self.rng, self.state.world.points_per_flush)
        for point in points:
            self.draw_point(point)
        return points

    def render(self):
        """Flush the canvas to the screen."""
        self.screen.blit(self.canvas, (0, 0))
        if self.show_ui:
            self.render_ui()
        pygame.display.flip()

    def render_ui(self):
        """Render the point counter overlay."""
        orbit = self.state.orbit
        stats = f"Points: {orbit.iterations}"
        if orbit.last_vertex is not None:
            stats += f"   Last vertex: {VERTEX_NAMES[orbit.last_vertex]}"
        text = self.font.render(stats, True, config.UI_TEXT_COLOR)
        self.screen.blit(text, (config.UI_MARGIN, config.UI_MARGIN))

    def handle_events(self):
        """Stop when the window is closed or the exit key is pressed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == config.KEY_EXIT:
                self.running = False

    def step(self):
        """Advance and present one frame."""
        self.update()
        self.render()

    def run(self, fps=None, max_frames=None):
        """Main loop. Runs until the window closes or max_frames frames are shown."""
        fps = fps if fps is not None else config.FPS
        frames = 0
        try:
            while self.running:
                self.clock.tick(fps)

                self.handle_events()
                self.step()

                frames += 1
                if max_frames is not None and frames >= max_frames:
                    break
        finally:
            pygame.quit()
        return frames


def positive_int(value):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def main():
    """Main function to start the chaos game."""
    parser = argparse.ArgumentParser(description="Chaos game: plot a Sierpinski triangle one random midpoint at a time")
    parser.add_argument("--width", type=positive_int, default=config.WINDOW_WIDTH, help="Window width in pixels")
    parser.add_argument("--height", type=positive_int, default=config.WINDOW_HEIGHT, help="Window height in pixels")
    parser.add_argument("--margin", type=int, default=config.CIRCLE_MARGIN, help="Margin subtracted from the smaller side before computing the circle radius")
    parser.add_argument("--points-per-flush", type=positive_int, default=config.POINTS_PER_FLUSH, help="Points drawn between screen updates")
    parser.add_argument("--seed", type=int, default=config.RANDOM_SEED, help="Random seed for a reproducible run")
    parser.add_argument("--fps", type=positive_int, default=config.FPS, help="Target FPS")
    args = parser.parse_args()

    if not 0 <= args.margin < min(args.width, args.height):
        parser.error("--margin must be non-negative and smaller than the window's shorter side")

    simulation = ChaosGameSimulation(
        width=args.width,
        height=args.height,
        margin=args.margin,
        points_per_flush=args.points_per_flush,
        seed=args.seed
    )
    frames = simulation.run(fps=args.fps)
    print(f"Plotted {simulation.state.orbit.iterations} points in {frames} frames")


if __name__ == "__main__":
    main()
