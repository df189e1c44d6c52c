"""Command-line entry points: check arguments, load a map and play it."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from os import PathLike
from typing import Optional, Union

import pygame

from solong.board import MapError
from solong.game import KEY_ESCAPE, Game, MoveOutcome
from solong.render import (
    TILE_SIZE,
    Renderer,
    fits_screen,
    load_textures,
)

MAP_EXTENSION = ".ber"
ASSETS_DIR = "assets"
WINDOW_TITLE = "so_long"

_PYGAME_KEYS = {
    pygame.K_UP: 65362,
    pygame.K_DOWN: 65364,
    pygame.K_LEFT: 65361,
    pygame.K_RIGHT: 65363,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


def is_valid_extension(filename: str) -> bool:
    """Whether ``filename`` ends in ``.ber`` (case-sensitive)."""
    return filename.endswith(MAP_EXTENSION)


def _say_goodbye() -> None:
    print("👋 Fermeture du jeu !")


def _report(game: Game, outcome: MoveOutcome, renderer: Renderer,
            collectibles_before: int, moves_before: int) -> Optional[int]:
    """Print what a move did, redraw, and return an exit status if play ends."""
    if outcome is MoveOutcome.IGNORED:
        return None
    if outcome is MoveOutcome.QUIT:
        _say_goodbye()
        return 0
    if outcome is MoveOutcome.OUT_OF_BOUNDS:
        print("⛔ Mouvement hors limites !")
        return None
    if outcome is MoveOutcome.WALL:
        print("⛔ Collision avec un mur !")
        return None
    if outcome is MoveOutcome.EXIT_LOCKED:
        print(f"⛔ Il reste encore des collectibles ! "
              f"({game.collectibles_left()} restants)")
        return None
    if outcome is MoveOutcome.CAUGHT:
        if game.moves == moves_before:
            # The player walked into an enemy.
            print("💀 GAME OVER ! Vous avez été attrapé par un ennemi !")
            _say_goodbye()
            return 0
        print("💀 GAME OVER ! Un ennemi vous a attrapé !")
        return 1
    if outcome is MoveOutcome.WON:
        print("🎉 Victoire ! Vous avez collecté tous les objets ! "
              f"Sortie atteinte en {game.moves} déplacements!")
        return 0
    if game.collectibles_left() < collectibles_before:
        print("🍎 Collectible ramassé !")
    if game.exit_open:
        renderer.open_exit()
    x, y = game.player
    print(f"\033[H\033[JJoueur déplacé à ({x}, {y}), Mouvements: {game.moves}")
    _redraw(game, renderer)
    return None


def _redraw(game: Game, renderer: Renderer) -> None:
    renderer.draw()
    if game.bonus:
        print(f"Nombre de mouvements affiché sur la fenêtre : {game.moves}")
    pygame.display.flip()


def _play(game: Game, renderer: Renderer) -> int:
    """Run the event loop until the game ends; return the exit status."""
    while True:
        if game.bonus:
            events = pygame.event.get()
            renderer.tick()
            pygame.display.flip()
        else:
            events = [pygame.event.wait()]
        for event in events:
            if event.type == pygame.QUIT:
                _say_goodbye()
                return 0
            if event.type != pygame.KEYUP:
                continue
            keycode = _PYGAME_KEYS.get(event.key, event.key)
            collectibles_before = game.collectibles_left()
            moves_before = game.moves
            outcome = game.handle_key(keycode)
            status = _report(game, outcome, renderer,
                             collectibles_before, moves_before)
            if status is not None:
                return status


def run(path: Union[str, "PathLike[str]"], bonus: bool = False) -> int:
    """Load the map at ``path``, open a window and play; return the exit status."""
    try:
        game = Game.from_file(path, bonus)
    except MapError as exc:
        print(f"Error\n\t-> {exc.detail}")
        return 1
    board = game.board
    print(f"Carte chargée avec succès, hauteur: {board.height}, "
          f"largeur: {board.width}")
    px, py = game.player
    print(f"Joueur trouvé à -> X: {px}, Y: {py}")

    pygame.init()
    try:
        info = pygame.display.Info()
        if not fits_screen(board.width, board.height,
                           info.current_w, info.current_h):
            print("Erreur : La carte est trop grande pour l'écran.")
            print(f"Taille de l'écran : {info.current_w} x {info.current_h}")
            _say_goodbye()
            return 0
        surface = pygame.display.set_mode(
            (board.width * TILE_SIZE, board.height * TILE_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            textures = load_textures(ASSETS_DIR, bonus)
        except OSError:
            print("Error\nImpossible de charger une ou plusieurs textures.")
            return 1
        renderer = Renderer(surface, game, textures)
        _redraw(game, renderer)
        return _play(game, renderer)
    finally:
        pygame.quit()


def _start(argv: Optional[Sequence[str]], prog: str, bonus: bool) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Error \n\t->Usage: {prog} <fichier_map.ber>")
        return 1
    if not is_valid_extension(args[0]):
        print("Error\n\t->Le fichier doit avoir l'extension '.ber'")
        return 1
    return run(args[0], bonus)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a map without enemies; ``argv`` holds the arguments after the program name."""
    return _start(argv, "so_long", bonus=False)


def main_bonus(argv: Optional[Sequence[str]] = None) -> int:
    """Play a map with enemies, animation and an on-screen move counter."""
    return _start(argv, "so_long_bonus", bonus=True)