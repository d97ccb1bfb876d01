
CONFIG = {
    "CELL_SIZE": 30,
    "FALL_START_MS": 400,
    "FALL_STEP_MS": 2,
    "FALL_MIN_MS": 100,
    "CLEAR_CHECK_MS": 20,
    "POINTS_PER_ROW": 10,
    "SEED": None,
    "MUSIC_PATH": "assets/music.ogg",
    "MUSIC_VOLUME": 0.3,
    "MUTE": False,
    "LOG_LEVEL": "INFO",
}
