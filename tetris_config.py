
CONFIG = {
    "COLS": 12,
    "ROWS": 20,
    "DROP_INTERVAL_MS": 1000,
    "ROW_SCORE": 10,
    "CELL_SIZE": 20,
    "FPS": 60,
    "SEED": None,
}
