"""Window, rendering, audio and the main loop."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import Optional, Sequence

import pygame

from .block import Block
from .colors import LIGHT_BLUE, get_cell_colors
from .game import Game, Key

WINDOW_SIZE = (500, 620)
TARGET_FPS = 60
BACKGROUND = (44, 44, 125)
TEXT_COLOR = (255, 255, 255)
FONT_PATH = Path("fonts/PressStart2P.ttf")
FONT_SIZE = 19
MUSIC_PATH = Path("sounds/music.mp3")
ROTATE_SOUND_PATH = Path("sounds/rotate.mp3")
CLEAR_SOUND_PATH = Path("sounds/clear.mp3")
DROP_INTERVAL = 0.2
BOARD_OFFSET = 11

_KEYMAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.UP,
}


class IntervalTimer:
    """Fires at most once per interval of elapsed time."""

    def __init__(self, interval: float, last_update: float = 0.0) -> None:
        self.interval = interval
        self.last_update = last_update

    def triggered(self, now: float) -> bool:
        """Return True and restart if at least one interval has passed."""
        if now - self.last_update >= self.interval:
            self.last_update = now
            return True
        return False


def _rgb(color) -> tuple[int, int, int]:
    return (color.r, color.g, color.b)


def _draw_cells(surface, positions, color, offset_x, offset_y, cell_size) -> None:
    for cell in positions:
        rect = (
            cell.column * cell_size + offset_x,
            cell.row * cell_size + offset_y,
            cell_size - 1,
            cell_size - 1,
        )
        pygame.draw.rect(surface, color, rect)


def _draw_block(surface, block: Block, offset_x: int, offset_y: int, cell_size: int) -> None:
    color = _rgb(get_cell_colors()[block.id])
    _draw_cells(surface, block.cell_positions(), color, offset_x, offset_y, cell_size)


def _next_block_offset(block: Block) -> tuple[int, int]:
    if block.id in (3, 4):
        return (255, 290)
    return (270, 270)


def _draw_game(surface, game: Game) -> None:
    colors = get_cell_colors()
    size = game.grid.cell_size
    for row, values in enumerate(game.grid.cells):
        for column, value in enumerate(values):
            rect = (
                column * size + BOARD_OFFSET,
                row * size + BOARD_OFFSET,
                size - 1,
                size - 1,
            )
            pygame.draw.rect(surface, _rgb(colors[value]), rect)
    _draw_block(surface, game.current_block, BOARD_OFFSET, BOARD_OFFSET, size)
    _draw_block(surface, game.next_block, *_next_block_offset(game.next_block), size)


def _load_font() -> "pygame.font.Font":
    if FONT_PATH.is_file():
        return pygame.font.Font(str(FONT_PATH), FONT_SIZE)
    return pygame.font.Font(None, FONT_SIZE + 6)


def _load_sound(path: Path, audio: bool) -> Optional["pygame.mixer.Sound"]:
    if not audio or not path.is_file():
        return None
    try:
        return pygame.mixer.Sound(str(path))
    except pygame.error:
        return None


def _start_audio() -> bool:
    try:
        pygame.mixer.init()
    except pygame.error:
        return False
    if MUSIC_PATH.is_file():
        try:
            pygame.mixer.music.load(str(MUSIC_PATH))
            pygame.mixer.music.play(-1)
        except pygame.error:
            pass
    return True


def _draw_panel(surface, font, game: Game) -> None:
    surface.fill(BACKGROUND)
    surface.blit(font.render("Score", True, TEXT_COLOR), (365, 15))
    surface.blit(font.render("Next", True, TEXT_COLOR), (370, 175))
    if game.game_over:
        surface.blit(font.render("GAME OVER", True, TEXT_COLOR), (320, 450))
    panel = _rgb(LIGHT_BLUE)
    pygame.draw.rect(surface, panel, (320, 55, 170, 60), border_radius=9)
    score_text = font.render(str(game.score), True, TEXT_COLOR)
    surface.blit(score_text, (320 + (170 - score_text.get_width()) // 2, 65))
    pygame.draw.rect(surface, panel, (320, 215, 170, 180), border_radius=16)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="blockfall", description="Falling-block puzzle game.")
    parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Blockfall")
        clock = pygame.time.Clock()
        font = _load_font()

        audio = _start_audio()
        rotate_sound = _load_sound(ROTATE_SOUND_PATH, audio)
        clear_sound = _load_sound(CLEAR_SOUND_PATH, audio)

        game = Game(
            on_rotate=rotate_sound.play if rotate_sound else None,
            on_clear=clear_sound.play if clear_sound else None,
        )
        start = time.monotonic()
        timer = IntervalTimer(DROP_INTERVAL)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        game.handle_key(_KEYMAP.get(event.key, Key.OTHER))
            if not running:
                break
            if timer.triggered(time.monotonic() - start):
                game.move_block_down()
            _draw_panel(surface, font, game)
            _draw_game(surface, game)
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())