
import logging
import sys
import traceback
from enum import Enum

import pygame
from tetro_config import CONFIG, apply_debug_tuning
from tetro_game import Game
from tetro_input import edit_initials, game_command, menu_key
from tetro_layout import compute_dims
from tetro_render import RenderAssets
from tetro_rng import ShapeRandom
from tetro_scoring import Rankings

log = logging.getLogger("tetrodropper")


class State(Enum):
    TITLE = 0
    GAME = 1
    SCORES = 2
    QUIT = 3


def now() -> float:
    return pygame.time.get_ticks() / 1000.0


def wait_menu(clock, accepted):
    """Block on the menu keys in `accepted` and return the one pressed."""
    while True:
        for e in pygame.event.get():
            k = menu_key(e)
            if k in accepted:
                return k
        clock.tick(CONFIG["FPS"])


def title_screen(screen, render, clock) -> State:
    render.draw_title(screen)
    pygame.display.flip()
    k = wait_menu(clock, ("RET", "S", "Q"))
    return {"RET": State.GAME, "S": State.SCORES, "Q": State.QUIT}[k]


def score_screen(screen, render, clock, rankings) -> State:
    render.draw_rankings(screen, rankings.pairs())
    pygame.display.flip()
    return State.TITLE if wait_menu(clock, ("T", "Q")) == "T" else State.QUIT


def insert_ranking_name(screen, render, clock) -> str:
    name, i = "AAA", 0
    while True:
        for e in pygame.event.get():
            name, i, done = edit_initials(e, name, i)
            if done:
                if e.type == pygame.QUIT:
                    # let the gameover prompt see the close request too
                    pygame.event.post(e)
                return name
        render.draw_name_entry(screen, name, i)
        pygame.display.flip()
        clock.tick(CONFIG["FPS"])


def game_screen(screen, render, clock, rankings, rng) -> State:
    game = Game(rng, now())
    render.rebuild_board_surface(game.board)

    while not game.over:
        render.draw_game(screen, game.current, game.preview, game.score, game.speed)
        pygame.display.flip()
        clock.tick(CONFIG["FPS"])

        locked = game.update(now())
        if locked:
            if locked.cleared_rows:
                render.flash_rows(screen, locked.cleared_rows)
                pygame.display.flip()
                clock.tick(CONFIG["FPS"])
            render.rebuild_board_surface(game.board)
            continue

        for e in pygame.event.get():
            cmd = game_command(e)
            if cmd:
                game.handle(cmd)

    render.draw_game(screen, game.current, game.preview, game.score, game.speed)
    if rankings.is_top_score(game.score):
        rankings.record(insert_ranking_name(screen, render, clock), game.score)
        render.draw_game(screen, game.current, game.preview, game.score, game.speed)

    render.draw_popup(screen, "Game Over. Press [T] to go to the title screen or [Q] to quit.")
    pygame.display.flip()
    return State.TITLE if wait_menu(clock, ("T", "Q")) == "T" else State.QUIT


def run():
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetrodropper")
    font = pygame.font.SysFont(None, 22)
    mono = pygame.font.SysFont("monospace", 14)
    render = RenderAssets(dims, font, mono)
    clock = pygame.time.Clock()

    rankings = Rankings()
    rng = ShapeRandom(CONFIG["SEED"])

    state = State.TITLE
    while state is not State.QUIT:
        if state is State.TITLE:
            state = title_screen(screen, render, clock)
        elif state is State.GAME:
            state = game_screen(screen, render, clock, rankings, rng)
        else:
            state = score_screen(screen, render, clock, rankings)


def die(exc: BaseException):
    """Report where the process ran out of memory and terminate."""
    frame = traceback.extract_tb(exc.__traceback__)[-1]
    log.critical("%s: %s: %d: %s", frame.filename, frame.name, frame.lineno,
                 str(exc) or type(exc).__name__)
    pygame.quit()
    sys.exit(1)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    debug = "--debug" in argv
    if debug:
        apply_debug_tuning()
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING,
                        format="%(name)s: %(levelname)s: %(message)s")
    try:
        run()
    except MemoryError as exc:
        die(exc)
    pygame.quit()


if __name__ == '__main__':
    main()
