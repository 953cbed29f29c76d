"""
Ride Vehicle Editor - Editor Application

Main application class: a top-down park view where cars can be picked up
with the vehicle drag tool.
"""
import logging
from typing import Optional

import pygame
from pygame import Rect

from park.core.clock import GameClock
from park.core.vehicles import Car
from park.formats.park_data import ParkData
from .core.constants import *
from .controllers.action_registry import ActionRegistry
from .controllers.events import REFRESH_VEHICLE, EventBus
from .controllers.highlight_state import HighlightState
from .controllers.vehicle_dragger import VehicleDragger
from .controllers.view_state import ViewState
from .rendering.park_renderer import ParkRenderer
from .tools.base_tool import ToolEventArgs
from .tools.tool_manager import ToolManager

LOGGER = logging.getLogger(__name__)


class Participant:
    """One player's copy of the park with its own dragger."""

    def __init__(self, name: str, park_path: str, clock: GameClock):
        self.park = ParkData()
        self.park.load(park_path)
        self.registry = ActionRegistry(name)
        self.events = EventBus()
        self.tool_manager = ToolManager()
        self.highlight_state = HighlightState()
        self.dragger = VehicleDragger(
            self.park,
            self.registry,
            self.events,
            self.tool_manager,
            clock,
            self.highlight_state,
        )


class EditorApplication:
    """Main editor application."""

    def __init__(self, park_path: str, multiplayer: bool = False):
        pygame.init()

        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
        pygame.display.set_caption("Ride Vehicle Editor")
        self.font = pygame.font.SysFont("monospace", 14)

        self.game_clock = GameClock()
        self.host = Participant("host", park_path, self.game_clock)
        self.client: Optional[Participant] = None
        if multiplayer:
            self.client = Participant("client", park_path, self.game_clock)
            self.host.registry.connect(self.client.registry)

        self.view_state = ViewState(
            Rect(CANVAS_OFFSET_X, CANVAS_OFFSET_Y,
                 self.screen_width - CANVAS_OFFSET_X,
                 self.screen_height - CANVAS_OFFSET_Y - STATUS_HEIGHT),
            scale=CANVAS_SCALE,
        )
        self.selected_car: Optional[Car] = None
        self.status_message = "Click a car to select it, D to drag"
        self.show_grid = True

        self.host.events.subscribe(REFRESH_VEHICLE, self._on_vehicle_refreshed)

        self.running = True
        self.clock = pygame.time.Clock()

    @property
    def park(self) -> ParkData:
        return self.host.park

    def hit_test(self, screen_pos: tuple[int, int]) -> ToolEventArgs:
        """Tile corner and top element index under a screen position."""
        corner = self.view_state.screen_to_tile_corner(screen_pos)
        if corner is None:
            return ToolEventArgs(screen_coords=screen_pos)
        index = self.park.top_element_index(corner.x, corner.y)
        if index is None:
            return ToolEventArgs(screen_coords=screen_pos)
        return ToolEventArgs(corner, index, screen_pos)

    def handle_event(self, event: pygame.event.Event):
        """Route a single pygame event to the active tool or editor commands."""
        if event.type == pygame.QUIT:
            self.running = False

        elif event.type == pygame.MOUSEMOTION:
            self.host.tool_manager.handle_move(self.hit_test(event.pos))

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.host.dragger.is_dragging():
                result = self.host.tool_manager.handle_confirm(self.hit_test(event.pos))
                if result.message:
                    self.status_message = result.message
            else:
                self._select_car_at(event.pos)

        elif event.type == pygame.KEYDOWN:
            self._handle_key(event.key, event.mod)

    def _handle_key(self, key: int, modifiers: int):
        if key == pygame.K_ESCAPE:
            self.host.tool_manager.cancel_current_tool()
        elif key == pygame.K_d:
            self._toggle_drag()
        elif key == pygame.K_g:
            self.show_grid = not self.show_grid
        elif key == pygame.K_s and modifiers & pygame.KMOD_CTRL:
            self.park.save()
            self.status_message = f"Saved {self.park.filepath}"

    def _select_car_at(self, screen_pos: tuple[int, int]):
        coords = self.view_state.screen_to_map(screen_pos)
        car = self.park.get_car_at(coords.x, coords.y) if coords else None
        self.selected_car = car
        self.host.highlight_state.selected_car_id = car.id if car else None
        self.status_message = f"Selected car {car.id}" if car else "No car selected"

    def _toggle_drag(self):
        if self.host.dragger.is_dragging():
            self.host.tool_manager.cancel_current_tool()
            return
        if self.selected_car is None:
            # Nothing to drag; still closes any stale session
            self.host.dragger.toggle(True, None, None, None, 0, self._on_drag_finished)
            self.status_message = "Select a car first"
            return
        self.host.dragger.drag_car(self.selected_car, on_cancel=self._on_drag_finished)
        self.status_message = f"Dragging car {self.selected_car.id} - click to place, Esc to cancel"

    def _on_drag_finished(self):
        LOGGER.debug("Drag session finished")
        if self.status_message.startswith("Dragging"):
            self.status_message = "Drag cancelled"

    def _on_vehicle_refreshed(self, car_id: int):
        LOGGER.debug("Car %s refreshed", car_id)

    def _replication_status(self) -> str:
        if self.client is None or self.selected_car is None:
            return ""
        mirror = self.client.park.get_car_by_id(self.selected_car.id)
        if mirror is None:
            return " | client: missing"
        return f" | client: ({mirror.x}, {mirror.y}, {mirror.z})"

    def _render_status(self):
        status_rect = Rect(0, self.screen_height - STATUS_HEIGHT, self.screen_width, STATUS_HEIGHT)
        pygame.draw.rect(self.screen, COLOR_STATUS, status_rect)
        car = self.selected_car
        position = f" | car: ({car.x}, {car.y}, {car.z})" if car else ""
        unsaved = "* " if self.park.modified else ""
        text = unsaved + self.status_message + position + self._replication_status()
        self.screen.blit(self.font.render(text, True, COLOR_TEXT), (10, status_rect.y + 7))

    def render(self):
        self.screen.fill(COLOR_BG)
        ParkRenderer.render(
            self.screen, self.view_state, self.park, self.host.highlight_state, self.show_grid
        )
        self._render_status()
        pygame.display.flip()

    def run(self):
        """Main loop; one simulation tick per frame."""
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.render()
            self.game_clock.tick()
            self.clock.tick(FPS)

        # Closing the window mid-drag puts the car back
        self.host.tool_manager.cancel_current_tool()
        pygame.quit()
