from __future__ import annotations

SIZE = 27
UPDATES_PER_SECOND = 8
FRAMES_PER_SECOND = 60
WINDOW_SIZE = (800, 800)
TITLE = "snake"

VOID = (0, 0, 0)
BACKGROUND = (77, 77, 89)
SNAKE = (255, 255, 128)
FRUIT = (255, 0, 0)
