import pygame
import sys
import asyncio

from maze_data import CELL_SIZE, MAZE_HEIGHT, MAZE_WIDTH, WALL
from game_state import MazeGame

# ==== DETECT WEB ====
IS_WEB = sys.platform == "emscripten"

# ==== KONFIGURASI ====
UI_HEIGHT = 90
FPS = 60

SCREEN_WIDTH = MAZE_WIDTH * CELL_SIZE
SCREEN_HEIGHT = MAZE_HEIGHT * CELL_SIZE + UI_HEIGHT

# ==== WARNA ====
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED   = (255, 0, 0)
GREEN = (0, 128, 0)
YELLOW = (255, 255, 0)
GRAY = (128, 128, 128)

# ==== KEY BINDINGS ====
MOVE_KEYS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}
DIFFICULTY_KEYS = {
    pygame.K_1: "easy",
    pygame.K_2: "medium",
    pygame.K_3: "hard",
}
RESTART_KEYS = (pygame.K_n, pygame.K_r)
WIN_CONFIRM_KEYS = (pygame.K_r, pygame.K_RETURN, pygame.K_SPACE)


# ==== INPUT ====
def handle_key(game, key):
    """Apply one key press to the game. Returns a short label of what happened."""
    if game.won:
        if key in WIN_CONFIRM_KEYS:
            game.restart()
            return "restart"
        if key in DIFFICULTY_KEYS:
            game.restart(DIFFICULTY_KEYS[key])
            return "difficulty"
        return None

    if key in MOVE_KEYS:
        if game.step(MOVE_KEYS[key]):
            return "win"
        return "move"

    if key in DIFFICULTY_KEYS:
        game.restart(DIFFICULTY_KEYS[key])
        return "difficulty"

    if key in RESTART_KEYS:
        game.restart()
        return "restart"

    return None


# ==== DRAW ====
def draw_maze(surface, game):
    """Draw the cells, the goal (green) and the player (red)."""
    for r, row in enumerate(game.maze):
        for c, cell in enumerate(row):
            rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(surface, BLACK if cell == WALL else WHITE, rect)
            pygame.draw.rect(surface, GRAY, rect, 1)

    goal_x, goal_y = game.goal
    pygame.draw.rect(surface, GREEN, (goal_x * CELL_SIZE, goal_y * CELL_SIZE, CELL_SIZE, CELL_SIZE))

    player_x, player_y = game.player
    pygame.draw.rect(surface, RED, (player_x * CELL_SIZE, player_y * CELL_SIZE, CELL_SIZE, CELL_SIZE))


def draw_panel(surface, game, font):
    ui_y = game.height * CELL_SIZE
    width = surface.get_width()
    pygame.draw.rect(surface, GRAY, (0, ui_y, width, UI_HEIGHT))

    difficulty_text = font.render(f"Difficulty: {game.difficulty}", True, WHITE)
    surface.blit(difficulty_text, (10, ui_y + 10))

    moves_text = font.render(f"Moves: {game.moves}", True, YELLOW)
    surface.blit(moves_text, (width - 120, ui_y + 10))

    help_text = font.render("Arrows: move   1/2/3: easy/medium/hard   N: new maze", True, WHITE)
    surface.blit(help_text, (10, ui_y + 45))


def draw_win_overlay(surface, game, font_large, font_huge):
    maze_height = game.height * CELL_SIZE
    width = surface.get_width()

    overlay = pygame.Surface((width, maze_height))
    overlay.set_alpha(200)
    overlay.fill(BLACK)
    surface.blit(overlay, (0, 0))

    win_text = font_huge.render("YOU WIN!", True, GREEN)
    surface.blit(win_text, win_text.get_rect(center=(width // 2, maze_height // 2 - 40)))

    restart_text = font_large.render("Press R to play again", True, WHITE)
    surface.blit(restart_text, restart_text.get_rect(center=(width // 2, maze_height // 2 + 30)))


# ==== MAIN GAME LOOP ====
async def main():
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("Maze Game")

    font_small = pygame.font.SysFont(None, 24)
    font_large = pygame.font.SysFont(None, 40)
    font_huge = pygame.font.SysFont(None, 72)

    game = MazeGame()

    clock = pygame.time.Clock()
    running = True

    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                action = handle_key(game, event.key)
                if action in ("difficulty", "restart"):
                    print(f"🔁 {action}: {game.difficulty}")

        screen.fill(WHITE)
        draw_maze(screen, game)
        draw_panel(screen, game, font_small)
        if game.won:
            draw_win_overlay(screen, game, font_large, font_huge)

        pygame.display.flip()
        await asyncio.sleep(0)  # CRITICAL for Pygbag

    pygame.quit()


# ==== RUN ====
if __name__ == "__main__":
    print(f"▶️ Starting maze game (web: {IS_WEB})")
    asyncio.run(main())
