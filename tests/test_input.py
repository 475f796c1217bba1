import pygame
import pytest

from tetro_input import Command, edit_initials, game_command, menu_key


def key(k, mod=0):
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=mod)


@pytest.mark.parametrize("k, cmd", [
    (pygame.K_w, Command.ROTATE), (pygame.K_UP, Command.ROTATE),
    (pygame.K_a, Command.LEFT), (pygame.K_LEFT, Command.LEFT),
    (pygame.K_s, Command.DOWN), (pygame.K_DOWN, Command.DOWN),
    (pygame.K_d, Command.RIGHT), (pygame.K_RIGHT, Command.RIGHT),
])
def test_game_keys(k, cmd):
    assert game_command(key(k)) is cmd


def test_ctrl_c_forces_quit():
    assert game_command(key(pygame.K_c, pygame.KMOD_LCTRL)) is Command.QUIT
    assert game_command(key(pygame.K_c)) is None


def test_window_close_quits():
    assert game_command(pygame.event.Event(pygame.QUIT)) is Command.QUIT
    assert menu_key(pygame.event.Event(pygame.QUIT)) == "Q"


def test_other_events_ignored():
    assert game_command(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT, mod=0)) is None
    assert game_command(key(pygame.K_x)) is None


def test_menu_keys():
    assert menu_key(key(pygame.K_RETURN)) == "RET"
    assert menu_key(key(pygame.K_s)) == "S"
    assert menu_key(key(pygame.K_t)) == "T"
    assert menu_key(key(pygame.K_q)) == "Q"
    assert menu_key(key(pygame.K_p)) is None


def test_initials_editing():
    name, i, done = edit_initials(key(pygame.K_UP), "AAA", 0)
    assert (name, i, done) == ("BAA", 0, False)
    name, i, done = edit_initials(key(pygame.K_LEFT), name, i)
    assert i == 2
    name, i, done = edit_initials(key(pygame.K_DOWN), name, i)
    assert name == "BAZ"
    name, i, done = edit_initials(key(pygame.K_RIGHT), name, i)
    assert i == 0
    assert edit_initials(key(pygame.K_RETURN), name, i) == ("BAZ", 0, True)


def test_closing_window_confirms_initials():
    assert edit_initials(pygame.event.Event(pygame.QUIT), "KLM", 1) == ("KLM", 1, True)
    assert edit_initials(pygame.event.Event(pygame.KEYUP, key=pygame.K_UP, mod=0), "KLM", 1) == ("KLM", 1, False)
