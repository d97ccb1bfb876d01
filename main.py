
import argparse
import logging
import pygame, sys
from tetris_config import CONFIG
from tetris_layout import compute_dims
from tetris_input import intents_from_events, confirm_pressed
from tetris_engine import tick
from tetris_overlay import Overlay
from tetris_render import RenderAssets
from tetris_round import RoundMachine, Phase
from tetris_audio import start_music, stop_music

log = logging.getLogger("tetris")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Falling-block puzzle")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"], help="fixed piece sequence")
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"])
    p.add_argument("--music", default=CONFIG["MUSIC_PATH"])
    p.add_argument("--mute", action="store_true", default=CONFIG["MUTE"])
    p.add_argument("--log-level", default=CONFIG["LOG_LEVEL"],
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def apply_args(args, config=CONFIG):
    config["SEED"] = args.seed
    config["CELL_SIZE"] = args.cell_size
    config["MUSIC_PATH"] = args.music
    config["MUTE"] = args.mute
    config["LOG_LEVEL"] = args.log_level
    return config


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    apply_args(parse_args(argv))
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 48)
    render = RenderAssets(dims, font, big_font)
    log.info("window %dx%d, cell %dpx", dims.total_w, dims.total_h, dims.cell)
    clock = pygame.time.Clock()

    machine = RoundMachine(CONFIG)
    overlay = Overlay(CONFIG)
    music_on = False

    while True:
        dt = clock.tick(60)
        events = pygame.event.get()
        for e in events:
            if e.type == pygame.QUIT:
                stop_music()
                pygame.quit(); sys.exit()

        if machine.phase == Phase.MENU:
            for e in events:
                if e.type != pygame.KEYDOWN: continue
                if e.key == pygame.K_F1 and not overlay.active:
                    overlay.toggle(); continue
                if overlay.active:
                    overlay.handle(e)
            if not overlay.active and confirm_pressed(events):
                machine.confirm()
                if not CONFIG["MUTE"]:
                    music_on = start_music(CONFIG["MUSIC_PATH"], CONFIG["MUSIC_VOLUME"])
                continue
            render.draw_menu(screen, machine.last_score, machine.best_score)
            overlay.draw(screen, font, dims.total_w, dims.total_h)

        elif machine.phase == Phase.PLAYING:
            state = tick(machine.state, intents_from_events(events), dt)
            render.draw_round(screen, state)
            if state.game_over:
                if music_on:
                    stop_music(); music_on = False
                machine.finish()

        if machine.phase == Phase.GAME_OVER:
            machine.advance()

        pygame.display.flip()


if __name__ == '__main__':
    main()
