"""
Game constants for Snake Ventures.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen orientation: (0,0) is the top-left cell, y grows downward
DIRECTION_VECTORS = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Lifecycle phases
IDLE = "IDLE"
ACTIVE = "ACTIVE"
WON = "WON"
LOST = "LOST"
STALLED = "STALLED"
TERMINAL_PHASES = {WON, LOST, STALLED}

# End-of-game reasons
WALL = "wall"
SELF = "self"
WIN = "win"
BOARD_FULL = "board_full"

# Game settings
GRID_SIZE = 20
MAX_TARGETS = 10
TICK_INTERVAL_MS = 150
INITIAL_BODY = [(10, 10)]
INITIAL_DIRECTION = RIGHT
INITIAL_TARGET = (15, 10)
