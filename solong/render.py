"""Drawing a game onto a pygame surface with tile textures."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Union

import pygame

from solong.game import Game

TILE_SIZE = 32
"""Side of one map tile in pixels."""

SCREEN_MARGIN = 64
"""Vertical space kept free on the screen for window decorations."""

BLINK_FRAMES = 4500
"""Ticks between two frames of the collectible animation."""

COUNTER_RECT = pygame.Rect(6, 6, 140, 20)
"""Background of the move counter shown on bonus maps."""

COUNTER_LABEL = "Mouvements : "
LABEL_COLOR = (255, 215, 0)
NUMBER_COLOR = (255, 255, 255)
COUNTER_BACKGROUND = (0, 0, 0)

_PLAYER_FILES = ("player.xpm", "player_l.xpm", "player_r.xpm", "player_b.xpm")


def fits_screen(
    map_width: int, map_height: int, screen_width: int, screen_height: int
) -> bool:
    """Whether a map of this many tiles fits on a screen of this size."""
    return (
        map_width * TILE_SIZE <= screen_width
        and map_height * TILE_SIZE <= screen_height - SCREEN_MARGIN
    )


def _load(assets_dir: Path, name: str) -> pygame.Surface:
    path = assets_dir / name
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError, FileNotFoundError) as exc:
        raise OSError(f"Cannot load one or more textures: {path}") from exc


@dataclass
class Textures:
    """Images for every tile; ``exit`` starts as the closed door."""

    wall: pygame.Surface
    floor: pygame.Surface
    exit: pygame.Surface
    players: tuple[pygame.Surface, ...]
    collectibles: tuple[pygame.Surface, ...]
    enemy: Optional[pygame.Surface]
    assets_dir: Path


def load_textures(
    assets_dir: Union[str, "PathLike[str]"] = "assets", bonus: bool = False
) -> Textures:
    """Load every tile image from ``assets_dir``; bonus adds enemy and blink frame."""
    directory = Path(assets_dir)
    collectible_files = ["collectible.xpm"]
    if bonus:
        collectible_files.append("collectible2.xpm")
    return Textures(
        wall=_load(directory, "wall.xpm"),
        floor=_load(directory, "floor.xpm"),
        exit=_load(directory, "exit_closed.xpm"),
        players=tuple(_load(directory, name) for name in _PLAYER_FILES),
        collectibles=tuple(_load(directory, name) for name in collectible_files),
        enemy=_load(directory, "enemy.xpm") if bonus else None,
        assets_dir=directory,
    )


class Renderer:
    """Draws a game's board onto a surface and animates collectibles."""

    def __init__(
        self, surface: pygame.Surface, game: Game, textures: Textures
    ) -> None:
        self.surface = surface
        self.game = game
        self.textures = textures
        self.frame_count = 0
        self.blink = 0
        self._font: Optional[pygame.font.Font] = None

    def _image_for(self, tile: str) -> Optional[pygame.Surface]:
        textures = self.textures
        if tile == "1":
            return textures.wall
        if tile == "0":
            return textures.floor
        if tile == "E":
            return textures.exit
        if tile == "M":
            return textures.enemy
        if tile == "P":
            return textures.players[int(self.game.direction)]
        if tile == "C":
            return textures.collectibles[0]
        return None

    def _blit(self, image: pygame.Surface, x: int, y: int) -> None:
        self.surface.blit(image, (x * TILE_SIZE, y * TILE_SIZE))

    def draw(self) -> None:
        """Draw every tile, and the move counter on bonus games."""
        for y, row in enumerate(self.game.board.rows):
            for x, tile in enumerate(row):
                image = self._image_for(tile)
                if image is not None:
                    self._blit(image, x, y)
        if self.game.bonus:
            self._draw_counter()

    def _draw_counter(self) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 18)
        self.surface.fill(COUNTER_BACKGROUND, COUNTER_RECT)
        label = self._font.render(COUNTER_LABEL, True, LABEL_COLOR)
        number = self._font.render(str(self.game.moves), True, NUMBER_COLOR)
        self.surface.blit(label, (15, 10))
        self.surface.blit(number, (120, 10))

    def tick(self) -> int:
        """Advance the collectible animation one frame and redraw collectibles.

        Returns the index of the collectible frame now shown.
        """
        self.frame_count += 1
        if self.frame_count >= BLINK_FRAMES:
            self.blink = 1 - self.blink
            self.frame_count = 0
        frames = self.textures.collectibles
        index = self.blink % len(frames)
        for x, y in self.game.board.positions("C"):
            self._blit(frames[index], x, y)
        return index

    def open_exit(self) -> bool:
        """Swap in the open exit once no collectibles remain; True if swapped."""
        if self.game.collectibles_left() > 0:
            return False
        self.textures.exit = _load(self.textures.assets_dir, "exit.xpm")
        return True