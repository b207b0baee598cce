#!/usr/bin/env python3
"""Pygame visualization launcher for the toroidal fire simulation.

Opens a window showing the grid with burning cells shaded by how long
they have been on fire, and steps the model once per frame.

Usage:
    python scripts/pygame_run.py
"""

import logging
import sys
from pathlib import Path

import pygame

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from torus_fire import FireConfig, FireModel

from visualization import (
    GridRenderer,
    InfoPanel,
    SpeedSlider,
    BLACK,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_CELL_SIZE,
    DEFAULT_FPS,
    MIN_FPS,
    MAX_FPS,
)

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Main simulation runner with Pygame visualization.

    Handles the main loop, event processing, and coordination between
    the fire model and visualization components.

    Attributes:
        model: The fire simulation model.
        screen: Pygame display surface.
        clock: Pygame clock for FPS control.
        renderer: Grid renderer for drawing cells.
        info_panel: UI panel for displaying simulation info.
        slider: Speed control slider.
        paused: Whether the simulation is paused.
        current_fps: Current frames per second setting.
        first_frame: Flag to skip the first step (show initial state).
        dragging_slider: Whether the user is dragging the speed slider.
    """

    UI_HEIGHT = 180

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: int,
        config: FireConfig
    ) -> None:
        """Initialize the simulation runner.

        Args:
            width: Grid width in cells.
            height: Grid height in cells.
            cell_size: Size of each cell in pixels.
            config: Ignition and burn parameters for every run.
        """
        self.window_width = max(width * cell_size, 700)
        self.window_height = height * cell_size + self.UI_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Toroidal Fire")
        self.clock = pygame.time.Clock()

        # Store initial parameters for reset
        self.width = width
        self.height = height
        self.config = config
        self.model = FireModel(width, height, config)

        self.renderer = GridRenderer(cell_size)
        self.slider = SpeedSlider(
            x=0,
            y=0,
            width=300,
            height=20,
            min_val=MIN_FPS,
            max_val=MAX_FPS
        )
        self.info_panel = InfoPanel(self.slider)

        self.paused = False
        self.current_fps = DEFAULT_FPS
        self.first_frame = True
        self.dragging_slider = False

    def _reset(self) -> None:
        self.model = FireModel(self.width, self.height, self.config)
        self.paused = False
        self.first_frame = True
        logger.info("Simulation reset")

    def _handle_keyboard_events(self, event: pygame.event.Event) -> bool:
        """Handle keyboard input events.

        Returns:
            False if the simulation should quit, True otherwise.
        """
        if event.key == pygame.K_ESCAPE:
            return False

        elif event.key == pygame.K_SPACE:
            self.paused = not self.paused

        elif event.key == pygame.K_r:
            self._reset()

        return True

    def _handle_mouse_events(self, event: pygame.event.Event) -> None:
        """Handle slider dragging and button clicks."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.info_panel.reset_button_rect.collidepoint(event.pos):
                self._reset()
                return
            if self.info_panel.pause_button_rect.collidepoint(event.pos):
                self.paused = not self.paused
                return
            new_fps = self.slider.handle_click(*event.pos)
            if new_fps is not None:
                self.dragging_slider = True
                self.current_fps = new_fps

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging_slider = False

        elif event.type == pygame.MOUSEMOTION and self.dragging_slider:
            new_fps = self.slider.handle_click(*event.pos)
            if new_fps is not None:
                self.current_fps = new_fps

    def _update_simulation(self) -> None:
        """Update the simulation by one step if not paused."""
        if self.paused or self.first_frame:
            return

        if self.model.running:
            self.model.step()
            if not self.model.running:
                logger.info("Grid stable after %d steps: %s", self.model.steps, self.model)
                self.paused = True

    def _render(self) -> None:
        """Render all visual components to the screen."""
        self.screen.fill(BLACK)
        offset_x = (self.window_width - self.width * self.renderer.cell_size) // 2
        self.renderer.draw_grid(self.screen, self.model, offset_x, 0)
        self.info_panel.draw(
            self.screen,
            self.model,
            self.paused,
            self.current_fps,
            self.window_width,
            self.window_height
        )
        pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the user quits."""
        running = True

        while running:
            self._render()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not self._handle_keyboard_events(event):
                        running = False
                else:
                    self._handle_mouse_events(event)

            self._update_simulation()

            if self.first_frame:
                self.first_frame = False

            self.clock.tick(self.current_fps)

        pygame.quit()


def main() -> None:
    """Main entry point for the Pygame visualization."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    config = FireConfig(ignite_probability=0.3, burn_duration_limit=10, initial_ignition_count=5)
    runner = SimulationRunner(DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_CELL_SIZE, config)
    runner.run()


if __name__ == "__main__":
    main()
