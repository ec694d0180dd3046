"""The game window and the command that starts it."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence

from .errors import ArgumentError, CubError, ResolutionError
from .player import Key, Player
from .raycast import TILE
from .render import Frame, Renderer, Texture, load_texture
from .scene import Scene, load_scene, validate_filename

MAX_WIDTH = 2550
MAX_HEIGHT = 1400
TITLE = "cub3D"


def check_resolution(scene: Scene) -> tuple[int, int]:
    """Return the window size for ``scene`` or raise if it is too large."""
    width = scene.columns * TILE
    height = scene.rows * TILE
    if width > MAX_WIDTH or height > MAX_HEIGHT:
        raise ResolutionError()
    return width, height


class Game:
    """A running game: scene, player, renderer and the current frame."""

    def __init__(
        self, scene: Scene, textures: Mapping[str, Texture], minimap: bool = False
    ) -> None:
        self.scene = scene
        self.renderer = Renderer(scene, textures, minimap)
        self.frame = Frame(self.renderer.width, self.renderer.height)
        self.player = Player(
            x=scene.player_col * TILE + TILE / 2,
            y=scene.player_row * TILE + TILE / 2,
            angle=scene.player_angle,
        )
        self.running = True

    def handle_key(self, key: int) -> bool:
        """React to a key press; redraw and return True when the view changed."""
        if key == Key.ESC:
            self.running = False
            return False
        changed = self.player.handle_key(key, self.scene.grid)
        if changed:
            self.render()
        return changed

    def render(self) -> Frame:
        """Draw the current view into the game's frame."""
        return self.renderer.render(self.frame, self.player)


def _run(game: Game) -> None:
    import pygame

    key_map = {
        pygame.K_a: Key.LEFT,
        pygame.K_d: Key.RIGHT,
        pygame.K_w: Key.UP,
        pygame.K_s: Key.DOWN,
        pygame.K_LEFT: Key.CAMERA_LEFT,
        pygame.K_RIGHT: Key.CAMERA_RIGHT,
        pygame.K_ESCAPE: Key.ESC,
    }
    size = (game.frame.width, game.frame.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(TITLE)

        def show() -> None:
            surface = pygame.image.frombuffer(game.frame.to_bytes(), size, "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        game.render()
        show()
        while game.running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYDOWN and event.key in key_map:
                if game.handle_key(key_map[event.key]):
                    show()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on a ``.cub`` file; ``--minimap`` adds the overhead map."""
    args = list(sys.argv[1:] if argv is None else argv)
    minimap = "--minimap" in args
    args = [arg for arg in args if arg != "--minimap"]
    try:
        if len(args) != 1:
            raise ArgumentError()
        scene = load_scene(validate_filename(args[0]))
        check_resolution(scene)
        textures = {
            key: load_texture(path)
            for key, path in (
                ("EA", scene.east),
                ("SO", scene.south),
                ("NO", scene.north),
                ("WE", scene.west),
            )
        }
        game = Game(scene, textures, minimap)
    except CubError as err:
        print(err.report(), end="")
        return err.exit_code
    _run(game)
    return 0