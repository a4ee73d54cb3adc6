"""Top-level controller.

``Game`` owns the single ``WorldState`` and is the only thing input and the
renderer talk to. Input arrives as plain method calls; ``tick`` advances
the world one fixed step using one sampled clock value.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

import numpy as np

from . import config
from .blocks import BlockCatalog, default_catalog
from .breaking import BreakStateMachine, BreakTarget
from .camera import Camera
from .events import BlockPlaced, BlockRemoved
from .grid import TileGrid
from .hotbar import Hotbar
from .physics import Body
from .placement import place
from .player import MoveInput, spawn_body
from .player import update as update_player
from .world import TerrainGenerator


class PointerButton(Enum):
    LEFT = "left"  # place
    RIGHT = "right"  # break


@dataclass
class WorldState:
    grid: TileGrid
    body: Body
    camera: Camera
    breaker: BreakStateMachine = field(default_factory=BreakStateMachine)
    controls: MoveInput = field(default_factory=MoveInput)
    hotbar: Hotbar | None = None
    hover: tuple[int, int] | None = None


@dataclass(frozen=True)
class FrameView:
    """Read-only snapshot handed to the renderer each frame."""

    cells: np.ndarray
    catalog: BlockCatalog
    grid_version: int
    player_rect: tuple[float, float, float, float]
    camera: tuple[int, int]
    target: BreakTarget | None
    progress: float
    hover: tuple[int, int] | None
    hotbar_slots: tuple[int, ...]
    active_slot: int
    selected_block: int


class Game:
    def __init__(
        self,
        world: config.WorldConfig | None = None,
        view_size: tuple[int, int] = (config.WIDTH, config.HEIGHT),
        catalog: BlockCatalog | None = None,
        grid: TileGrid | None = None,
    ):
        self.world = world or config.WorldConfig()
        self.view_w, self.view_h = view_size
        catalog = catalog or (grid.catalog if grid is not None else default_catalog())
        if grid is None:
            grid = TerrainGenerator.from_config(self.world, catalog).generate()
        body = spawn_body(grid)
        self.state = WorldState(
            grid=grid,
            body=body,
            camera=Camera.centered_on(body, self.view_w, self.view_h),
            hotbar=Hotbar.for_catalog(catalog),
        )

    @property
    def grid(self) -> TileGrid:
        return self.state.grid

    # --- input ---

    def key_down(self, key: str) -> None:
        self.state.controls.key_down(key)

    def key_up(self, key: str) -> None:
        self.state.controls.key_up(key)

    def select_slot(self, index: int) -> bool:
        return self.state.hotbar.select_slot(index)

    def pointer_move(self, wx: int, wy: int) -> None:
        self.state.hover = (wx, wy)

    def pointer_down(self, button: PointerButton, wx: int, wy: int, now: float) -> BlockPlaced | None:
        state = self.state
        if not state.grid.in_bounds(wx, wy):
            return None
        if button is PointerButton.LEFT:
            return place(wx, wy, state.hotbar.selected_block, state.grid, state.body)
        state.breaker.start(state.grid, wx, wy, now)
        return None

    def pointer_up(self) -> None:
        self.state.breaker.cancel()

    # --- simulation ---

    def tick(self, now: float, dt: float = 1.0 / config.TICK_RATE) -> list[BlockRemoved]:
        state = self.state
        events: list[BlockRemoved] = []
        update_player(state.body, state.controls, state.grid, dt)
        removed = state.breaker.update(state.grid, now)
        if removed is not None:
            events.append(removed)
        state.camera.update(
            state.body,
            state.breaker.target,
            self.view_w,
            self.view_h,
            state.grid.width * config.TILE,
            state.grid.height * config.TILE,
        )
        return events

    def view(self, now: float) -> FrameView:
        state = self.state
        progress = state.breaker.sample(state.grid, now)
        return FrameView(
            cells=state.grid.cells,
            catalog=state.grid.catalog,
            grid_version=state.grid.version,
            player_rect=state.body.rect(),
            camera=state.camera.offset(),
            target=replace(state.breaker.target) if state.breaker.target else None,
            progress=progress,
            hover=state.hover,
            hotbar_slots=tuple(state.hotbar.slots),
            active_slot=state.hotbar.active_slot,
            selected_block=state.hotbar.selected_block,
        )
