# main.py
import argparse
import logging
from typing import Optional, Tuple

import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_GAP, HUD_HEIGHT,
    BG, EMPTY, WHITE, LIME, RED, TEXT, PAUSED,
    UP, DOWN, LEFT, RIGHT,
    Config,
)
from .render import Snapshot, SNAKE, HEAD, FOOD
from .session import Session

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}

CELL_COLORS = {SNAKE: WHITE, HEAD: LIME, FOOD: RED}

# ---------- Input ----------
def handle_input(session: Session, now_ms: int) -> bool:
    """Route pygame events to the session. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.VIDEORESIZE:
            session.resize(event.w, event.h - HUD_HEIGHT)
        elif event.type == pygame.KEYDOWN:
            if event.key in KEY_DIRECTIONS:
                session.direction(KEY_DIRECTIONS[event.key])
            elif event.key == pygame.K_SPACE:
                session.toggle_play(now_ms)
            elif event.key == pygame.K_ESCAPE:
                session.reset_food()
            elif event.key == pygame.K_r:
                session.reset()
    return True

# ---------- Draw ----------
def draw_cell(screen: pygame.Surface, row: int, col: int, size: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(col * size, HUD_HEIGHT + row * size, size - CELL_GAP, size - CELL_GAP)
    pygame.draw.rect(screen, color, rect)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, cell_size: int) -> None:
    screen.fill(BG)
    for row in range(snap.rows):
        for col in range(snap.cols):
            kind = int(snap.board[row, col])
            draw_cell(screen, row, col, cell_size, CELL_COLORS.get(kind, EMPTY))

    # HUD: play state, score, time
    if snap.is_game_over:
        status, color = "Game over", RED
    elif snap.is_playing:
        status, color = "Playing", TEXT
    else:
        status, color = "Paused (Space)", PAUSED
    width = screen.get_width()
    screen.blit(font.render(status, True, color), (8, 12))
    score = font.render(f"Score: {snap.score}", True, TEXT)
    screen.blit(score, score.get_rect(midtop=(width // 2, 12)))
    clock = font.render(snap.clock_text, True, TEXT)
    screen.blit(clock, clock.get_rect(topright=(width - 8, 12)))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    width, height = screen.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = font.render("YOU WIN" if snap.won else "GAME OVER", True, (240, 240, 250))
    sco   = font.render(f"Final score: {snap.score}", True, (220, 220, 230))
    sub   = font.render("Press R to start again", True, (220, 220, 230))

    screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 16)))
    screen.blit(sco, sco.get_rect(center=(width // 2, height // 2 + 16)))
    screen.blit(sub, sub.get_rect(center=(width // 2, height // 2 + 44)))

# ---------- Entry point ----------
def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--width", type=int, default=WIDTH, help="Initial window width in px")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Initial window height in px")
    parser.add_argument("--cell-size", type=int, default=Config.cell_size, help="Cell size in px")
    parser.add_argument("--move-ms", type=int, default=Config.move_every_ms, help="Movement tick interval")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)

def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(seed=args.seed, cell_size=args.cell_size, move_every_ms=args.move_ms)

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode((args.width, args.height + HUD_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Snake")
    frame_clock = pygame.time.Clock()

    session = Session(args.width, args.height, config=cfg)
    running = True

    while running:
        # 1) input
        now = pygame.time.get_ticks()
        running = handle_input(session, now)
        if not running:
            break

        # 2) update: the session's own clock decides when ticks are due
        session.advance(pygame.time.get_ticks())

        # 3) render
        snap = session.snapshot()
        draw_game(screen, font, snap, cfg.cell_size)
        if snap.is_game_over:
            draw_game_over(screen, font, snap)
        pygame.display.flip()
        frame_clock.tick(60)

    logger.info("Quit with score %d", session.score)
    pygame.quit()

if __name__ == "__main__":
    main()
