
"""Background music. Purely cosmetic; failures are logged and ignored."""
import logging
import os
import pygame

log = logging.getLogger(__name__)

def start_music(path, volume):
    if not os.path.exists(path):
        log.warning("music file %s not found, playing silently", path)
        return False
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(path)
        pygame.mixer.music.set_volume(max(0.0, min(1.0, float(volume))))
        pygame.mixer.music.play(loops=-1)
    except pygame.error as e:
        log.warning("audio unavailable: %s", e)
        return False
    log.info("looping %s at volume %.2f", path, volume)
    return True

def stop_music():
    if pygame.mixer.get_init():
        pygame.mixer.music.stop()
