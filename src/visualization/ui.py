"""UI components for the fire spread visualization.

This module contains interactive UI elements like the info panel
showing simulation status and the speed control slider.
"""

from typing import TYPE_CHECKING, Optional

import pygame

from torus_fire.cell import CellState
from .colors import WHITE, PANEL_COLOR

if TYPE_CHECKING:
    from torus_fire.model import FireModel


class InfoPanel:
    """Displays simulation information below the grid.

    Shows the current step, cell counts per state, run status and
    keyboard shortcuts, and hosts the speed slider and the buttons.

    Attributes:
        font: Main font for primary information.
        small_font: Smaller font for secondary information.
        slider: Speed slider drawn inside the panel.
        reset_button_rect: Clickable area of the RESET button.
        pause_button_rect: Clickable area of the PAUSE/RESUME button.
    """

    PANEL_HEIGHT = 160
    PANEL_PADDING = 20
    PANEL_ALPHA = 160
    BUTTON_W = 150
    BUTTON_H = 40
    SPACING = 20

    def __init__(self, slider: "SpeedSlider") -> None:
        self.font = pygame.font.Font(None, 30)
        self.small_font = pygame.font.Font(None, 24)
        self.reset_button_rect = pygame.Rect(0, 0, self.BUTTON_W, self.BUTTON_H)
        self.pause_button_rect = pygame.Rect(0, 0, self.BUTTON_W, self.BUTTON_H)
        self.slider = slider

    @staticmethod
    def status_label(model: "FireModel", paused: bool) -> str:
        if not model.running:
            return "FINISHED"
        return "PAUSED" if paused else "RUNNING"

    def draw(
        self,
        screen: pygame.Surface,
        model: "FireModel",
        paused: bool,
        fps: int,
        window_width: int,
        window_height: int
    ) -> None:
        """Draw the panel block beneath the grid."""

        # === PANEL DIMENSIONS ===
        panel_width = min(1100, window_width - 20)
        panel_x = (window_width - panel_width) // 2
        panel_y = window_height - self.PANEL_HEIGHT - 10

        panel_surface = pygame.Surface((panel_width, self.PANEL_HEIGHT), pygame.SRCALPHA)
        panel_surface.fill((*PANEL_COLOR, self.PANEL_ALPHA))
        screen.blit(panel_surface, (panel_x, panel_y))

        # === TEXTS ===
        step_text = self.font.render(f"Step: {model.steps}", True, WHITE)
        screen.blit(step_text, (panel_x + self.PANEL_PADDING, panel_y + 15))

        status_text = self.font.render(self.status_label(model, paused), True, WHITE)
        screen.blit(status_text, (panel_x + panel_width // 2 - status_text.get_width() // 2, panel_y + 15))

        counts = model.count_states()
        counts_text = self.small_font.render(
            f"Alive: {counts[CellState.Alive]}  "
            f"Burning: {counts[CellState.Burning]}  "
            f"Dead: {counts[CellState.Dead]}",
            True,
            WHITE,
        )
        screen.blit(counts_text, (panel_x + self.PANEL_PADDING, panel_y + 45))

        fps_text = self.small_font.render(f"Speed: {fps} FPS", True, WHITE)
        screen.blit(fps_text, (panel_x + self.PANEL_PADDING, panel_y + 70))

        hints = ("SPACE = Pause / Resume", "R = Reset", "ESC = Quit")
        for i, hint in enumerate(hints):
            surf = self.small_font.render(hint, True, WHITE)
            screen.blit(surf, (panel_x + panel_width - surf.get_width() - self.PANEL_PADDING, panel_y + 10 + 25 * i))

        # === SLIDER ===
        self.slider.x = panel_x + panel_width // 2 - self.slider.width // 2
        self.slider.y = panel_y + 60
        self.slider.draw(screen, fps)

        # === BUTTONS (RESET - PAUSE) ===
        center_x = panel_x + panel_width // 2
        button_y = panel_y + self.PANEL_HEIGHT - 55
        total_width = self.BUTTON_W * 2 + self.SPACING

        self.reset_button_rect.topleft = (center_x - total_width // 2, button_y)
        self.pause_button_rect.topleft = (self.reset_button_rect.right + self.SPACING, button_y)

        self._draw_button(screen, self.reset_button_rect, "RESET")
        self._draw_button(screen, self.pause_button_rect, "RESUME" if paused else "PAUSE")

    def _draw_button(self, screen: pygame.Surface, rect: pygame.Rect, label: str) -> None:
        pygame.draw.rect(screen, (180, 0, 0), rect, border_radius=10)
        pygame.draw.rect(screen, WHITE, rect, 2, border_radius=10)
        lbl = self.font.render(label, True, WHITE)
        screen.blit(lbl, lbl.get_rect(center=rect.center))


class SpeedSlider:
    """Interactive slider for controlling simulation speed.

    Allows the user to adjust the FPS (frames per second) by clicking
    and dragging the handle along a horizontal bar.

    Attributes:
        x: X coordinate of the slider's left edge.
        y: Y coordinate of the slider's top edge.
        width: Width of the slider bar in pixels.
        height: Height of the slider bar in pixels.
        min_val: Minimum value (FPS).
        max_val: Maximum value (FPS).
    """

    GRAB_MARGIN = 20

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        min_val: int,
        max_val: int
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.min_val = min_val
        self.max_val = max_val

    @staticmethod
    def draw_fire_icon(screen, x, y, scale=1.0):
        """Draw small fire-shaped icon centered at (x, y)."""
        pts = [
            (x, y - 12 * scale),
            (x + 6 * scale, y - 4 * scale),
            (x + 4 * scale, y + 6 * scale),
            (x, y + 10 * scale),
            (x - 4 * scale, y + 6 * scale),
            (x - 6 * scale, y - 4 * scale)
        ]

        pygame.draw.polygon(screen, (255, 80, 0), pts)       # main flame
        pygame.draw.polygon(screen, (255, 150, 0), pts, 2)   # outline

    def handle_position(self, current_val: int) -> int:
        """X coordinate of the handle for the given value."""
        if self.max_val <= self.min_val:
            return self.x
        ratio = (current_val - self.min_val) / (self.max_val - self.min_val)
        return self.x + int(ratio * self.width)

    def draw(self, screen: pygame.Surface, current_val: int) -> None:
        """Draw the bar with a fire icon as handle."""
        bar_rect = pygame.Rect(self.x, self.y, self.width, self.height)
        pygame.draw.rect(screen, (20, 20, 20), bar_rect, border_radius=6)
        pygame.draw.rect(screen, (70, 70, 70), bar_rect, 2, border_radius=6)

        self.draw_fire_icon(screen, self.handle_position(current_val), self.y + self.height // 2)

    def handle_click(self, mouse_x: int, mouse_y: int) -> Optional[int]:
        """FPS value under the mouse, or None when the click misses the slider.

        Used for both click and drag.
        """
        if not (self.x - self.GRAB_MARGIN <= mouse_x <= self.x + self.width + self.GRAB_MARGIN):
            return None
        if not (self.y - self.GRAB_MARGIN <= mouse_y <= self.y + self.height + self.GRAB_MARGIN):
            return None

        ratio = (mouse_x - self.x) / self.width
        new_val = self.min_val + ratio * (self.max_val - self.min_val)

        return max(self.min_val, min(self.max_val, int(new_val)))
