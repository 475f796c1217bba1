"""Keyboard mapping for the game and menu screens"""
from enum import Enum
from typing import Optional, Tuple

import pygame

from tetro_scoring import next_char, prev_char


class Command(Enum):
    ROTATE = "rotate"
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    QUIT = "quit"


GAME_KEYS = {
    pygame.K_w: Command.ROTATE, pygame.K_UP: Command.ROTATE,
    pygame.K_a: Command.LEFT, pygame.K_LEFT: Command.LEFT,
    pygame.K_s: Command.DOWN, pygame.K_DOWN: Command.DOWN,
    pygame.K_d: Command.RIGHT, pygame.K_RIGHT: Command.RIGHT,
}

MENU_KEYS = {
    pygame.K_RETURN: "RET", pygame.K_KP_ENTER: "RET",
    pygame.K_s: "S", pygame.K_t: "T", pygame.K_q: "Q",
}


def game_command(e: pygame.event.Event) -> Optional[Command]:
    if e.type == pygame.QUIT:
        return Command.QUIT
    if e.type != pygame.KEYDOWN:
        return None
    if e.key == pygame.K_c and e.mod & pygame.KMOD_CTRL:
        return Command.QUIT
    return GAME_KEYS.get(e.key)


def menu_key(e: pygame.event.Event) -> Optional[str]:
    if e.type == pygame.QUIT:
        return "Q"
    if e.type != pygame.KEYDOWN:
        return None
    return MENU_KEYS.get(e.key)


def edit_initials(e: pygame.event.Event, name: str, cursor: int) -> Tuple[str, int, bool]:
    """Apply one event to the initials editor; returns (name, cursor, done).

    Closing the window confirms the initials entered so far.
    """
    if e.type == pygame.QUIT:
        return name, cursor, True
    if e.type != pygame.KEYDOWN:
        return name, cursor, False
    if e.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        return name, cursor, True
    if e.key in (pygame.K_UP, pygame.K_DOWN):
        step = next_char if e.key == pygame.K_UP else prev_char
        name = name[:cursor] + step(name[cursor]) + name[cursor + 1:]
    elif e.key == pygame.K_LEFT:
        cursor = (cursor - 1) % len(name)
    elif e.key == pygame.K_RIGHT:
        cursor = (cursor + 1) % len(name)
    return name, cursor, False
