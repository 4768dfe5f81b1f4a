"""Game state assembly, texture loading, the frame loop and the command entry."""

from __future__ import annotations

import sys
from array import array
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from .cubfile import check_args, parse_cub_file
from .errors import CubError, ErrorCode, error_message
from .mapcheck import GameMap, store_map, validate_map
from .player import Key, Player
from .radar import PLAYER_MARKER, Radar
from .raycast import DDA_MARKER, cast_ray
from .render import FrameBuffer, Texture, TextureId, draw_circle, draw_column, draw_map
from .vectors import Vec2

WIDTH = 640
HEIGHT = 480
SCALE_FACTOR = 16
UNASSIGNED = -1

_RED = "\033[0;31m"
_RESET = "\033[0m"


def load_texture(path: str) -> Texture:
    """Decode an image file into a Texture."""
    from PIL import Image

    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
            pixels = [(r << 16) | (g << 8) | b for r, g, b in rgb.getdata()]
            return Texture(rgb.width, rgb.height, pixels)
    except OSError as exc:
        raise CubError(ErrorCode.INVALID_PATH) from exc


@dataclass
class Game:
    """Everything needed to simulate and draw a scene."""

    game_map: GameMap
    player: Player
    texture_paths: dict[TextureId, Optional[str]]
    floor_color: int = UNASSIGNED
    ceiling_color: int = UNASSIGNED
    radar: Radar = field(default_factory=Radar)
    textures: dict[TextureId, Texture] = field(default_factory=dict)
    scale: int = SCALE_FACTOR

    @classmethod
    def from_file(cls, path: str) -> Game:
        """Parse and validate the scene file at ``path``."""
        scene = parse_cub_file(path)
        width, spawn = validate_map(scene.map_lines)
        game_map = store_map(scene.map_lines, width)
        player = Player()
        if spawn is not None:
            player.pos = Vec2(spawn.x, spawn.y)
            player.face(spawn.direction)
            player.pos_set = True
        return cls(
            game_map=game_map,
            player=player,
            texture_paths={
                TextureId.NORTH: scene.no_texture,
                TextureId.SOUTH: scene.so_texture,
                TextureId.WEST: scene.we_texture,
                TextureId.EAST: scene.ea_texture,
            },
            floor_color=UNASSIGNED if scene.floor_color is None else scene.floor_color,
            ceiling_color=UNASSIGNED if scene.ceiling_color is None else scene.ceiling_color,
            radar=Radar(scale=SCALE_FACTOR),
        )

    def load_textures(self, loader: Callable[[str], Texture]) -> dict[TextureId, Texture]:
        """Load the four wall textures with ``loader``."""
        if any(self.texture_paths.get(tex_id) is None for tex_id in TextureId):
            raise CubError(ErrorCode.INVALID_PATH)
        loaded: dict[TextureId, Texture] = {}
        for tex_id in TextureId:
            path = self.texture_paths[tex_id]
            assert path is not None
            try:
                loaded[tex_id] = loader(path)
            except OSError as exc:
                raise CubError(ErrorCode.INVALID_PATH) from exc
        self.textures = loaded
        return loaded

    def step(self) -> None:
        """Advance the simulation by one frame."""
        self.player.update(self.game_map, self.radar)

    def render_frame(self, frame: FrameBuffer) -> None:
        """Draw the mini-map, the 3D view and the radar into ``frame``."""
        if any(tex_id not in self.textures for tex_id in TextureId):
            raise RuntimeError("textures have not been loaded")
        player = self.player
        frame.clear()
        radius, color = PLAYER_MARKER
        draw_circle(frame, player.pos.x, player.pos.y, radius, color, self.scale)
        draw_map(frame, self.game_map.rows, self.scale)
        dda_radius, dda_color = DDA_MARKER
        for screen_x in range(frame.width):
            ray = cast_ray(
                player.pos, player.direction, player.plane, screen_x, frame.width, self.game_map
            )
            if ray.hit:
                draw_circle(
                    frame, ray.intersection.x, ray.intersection.y, dda_radius, dda_color, self.scale
                )
            draw_column(
                frame, ray, self.textures, self.floor_color, self.ceiling_color, screen_x
            )
        self.radar.sweep(player.pos.x, player.pos.y, self.game_map, frame)


def _frame_bytes(frame: FrameBuffer) -> bytes:
    data = array("I", (pixel | 0xFF000000 for pixel in frame.pixels))
    if sys.byteorder == "little":
        data.byteswap()
    return data.tobytes()


def run(game: Game) -> None:
    """Open a window and run the interactive loop until the player quits."""
    import pygame

    keymap = {
        pygame.K_w: Key.UP,
        pygame.K_s: Key.DOWN,
        pygame.K_a: Key.LEFT,
        pygame.K_d: Key.RIGHT,
        pygame.K_LEFT: Key.TURN_LEFT,
        pygame.K_RIGHT: Key.TURN_RIGHT,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Cub3D")
        frame = FrameBuffer(WIDTH, HEIGHT)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = keymap.get(event.key)
                    if key is not None and game.player.press(key):
                        print(f"The {event.key} key (ESC) was pressed\n")
                        running = False
                elif event.type == pygame.KEYUP:
                    key = keymap.get(event.key)
                    if key is not None:
                        game.player.release(key)
            if not running:
                break
            game.step()
            game.render_frame(frame)
            surface = pygame.image.frombuffer(
                _frame_bytes(frame), (frame.width, frame.height), "ARGB"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_args(args)
        game = Game.from_file(path)
    except CubError as err:
        print(f"[cub3d] {_RED}Fatal error: {error_message(err.code)}{_RESET}")
        return int(err.code)
    try:
        game.load_textures(load_texture)
    except CubError as err:
        return int(err.code)
    run(game)
    return 0