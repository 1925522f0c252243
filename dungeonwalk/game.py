"""The game window: event polling, per-frame logic and drawing."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence

import pygame

from .character import Character
from .tilemap import MapError, TileMap, TileType, load_map
from .utils import Key, frame_size, offset_position

logger = logging.getLogger(__name__)

FLOOR_TEXTURE = "assets/2 Dungeon Tileset/1 Tiles/Tile_20.png"
DEFAULT_TITLE = "My Game"
DEFAULT_MAP = "maps/small"
DEFAULT_TILE_SIZE = (32, 32)

_KEYS: dict[int, Key] = {
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def _load_texture(path: str) -> pygame.Surface | None:
    """Load an image, logging and returning None when it cannot be read."""
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError):
        logger.error("Failed to load texture from %s", path)
        return None


class Game:
    """A window showing a tile map and a player walking over its floor."""

    def __init__(self, title: str, map_filename: str, tile_size: tuple[int, int]) -> None:
        self.player = Character()
        self._textures: dict[str, pygame.Surface | None] = {}

        floor = _load_texture(FLOOR_TEXTURE)
        if floor is None:
            raise MapError("Failed to load floor texture")
        self._floor_texture = floor
        self._map: TileMap = load_map(map_filename)
        self._tile_size = (int(tile_size[0]), int(tile_size[1]))

        os.environ["SDL_VIDEO_WINDOW_POS"] = "0,0"
        pygame.display.init()
        sizes = pygame.display.get_desktop_sizes()
        window_size = sizes[0] if sizes else (0, 0)
        self._window = pygame.display.set_mode(window_size)
        pygame.display.set_caption(title)
        self._running = True

        x, y = self._map.extract_player_position()
        self.player.position = (float(x), float(y))

    def is_running(self) -> bool:
        """Tell whether the window is still open."""
        return self._running

    def close(self) -> None:
        """Close the window."""
        if self._running:
            self._running = False
            pygame.display.quit()

    def events(self) -> None:
        """Handle every pending window and keyboard event."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
                return
            if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                key = _KEYS.get(event.key, Key.UNKNOWN)
                if not self.player.is_input(key):
                    continue
                if event.type == pygame.KEYDOWN:
                    self.player.press(key)
                else:
                    self.player.release(key)

    def logic(self) -> None:
        """Advance the game by one frame."""
        self.player.logic(self)

    def render(self) -> None:
        """Draw the map and the player, then show the frame."""
        self._window.fill((0, 0, 0))
        self._render_map()
        self._render_player()
        pygame.display.flip()

    def _render_map(self) -> None:
        tile_w, tile_h = self._tile_size
        tile = pygame.transform.scale(self._floor_texture, self._tile_size)
        for (x, y), kind in self._map.tiles():
            if kind is TileType.EMPTY:
                continue
            self._window.blit(tile, (x * tile_w, y * tile_h))

    def _texture(self, path: str) -> pygame.Surface | None:
        if path not in self._textures:
            self._textures[path] = _load_texture(path)
        return self._textures[path]

    def _render_player(self) -> None:
        action = self.player.action
        texture = self._texture(action.texture_path)
        if texture is None:
            return
        texture_size = texture.get_size()
        if 0 in frame_size(texture_size):
            return
        left, top, width, height = action.frame_rect(texture_size)
        frame = texture.subsurface(pygame.Rect(left, top, width, height))
        sprite_size = (self._tile_size[0] * 2, self._tile_size[1] * 2)
        sprite = pygame.transform.scale(frame, sprite_size)
        px, py = offset_position(sprite_size, self.player.position, self._tile_size)
        self._window.blit(sprite, (int(px), int(py)))

    def __getitem__(self, coords: tuple[int, int]) -> TileType:
        return self._map[coords]

    @property
    def tile_size(self) -> tuple[int, int]:
        """Pixel size of one map tile."""
        return self._tile_size


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run it until it is closed."""
    parser = argparse.ArgumentParser(description="Walk a character around a dungeon map.")
    parser.parse_args(argv)
    try:
        game = Game(DEFAULT_TITLE, DEFAULT_MAP, DEFAULT_TILE_SIZE)
        while game.is_running():
            game.events()
            if not game.is_running():
                break
            game.logic()
            game.render()
        return 0
    except Exception as exc:  # noqa: BLE001 - report any failure and exit non-zero
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())