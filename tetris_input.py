"""Key edges -> intents. Only KEYDOWN counts; holding a key does not repeat."""
import pygame
from tetris_engine import Intents

KEYMAP = {
    pygame.K_UP: "rotate",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
}
CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)

def intents_from_events(events):
    it = Intents()
    for e in events:
        if e.type != pygame.KEYDOWN: continue
        name = KEYMAP.get(e.key)
        if name: setattr(it, name, True)
    return it

def confirm_pressed(events):
    return any(e.type == pygame.KEYDOWN and e.key in CONFIRM_KEYS for e in events)
