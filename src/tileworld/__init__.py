from .blocks import BlockCatalog, BlockId, BlockType, default_catalog
from .breaking import BreakStateMachine, BreakTarget
from .camera import Camera
from .game import Game, PointerButton, WorldState
from .grid import TileGrid
from .physics import Body
from .value_noise import NoiseField
from .world import TerrainGenerator

__all__ = [
    "BlockCatalog",
    "BlockId",
    "BlockType",
    "Body",
    "BreakStateMachine",
    "BreakTarget",
    "Camera",
    "Game",
    "NoiseField",
    "PointerButton",
    "TerrainGenerator",
    "TileGrid",
    "WorldState",
    "default_catalog",
]
