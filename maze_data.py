# maze_data.py
import random

# ==== KONFIGURASI ====
MAZE_WIDTH = 10
MAZE_HEIGHT = 10

# Default ukuran cell (digunakan di main.py)
CELL_SIZE = 40

# 1 = dinding, 0 = jalan
WALL = "1"
PATH = "0"

DIFFICULTY_DENSITY = {
    "easy": 0.1,
    "medium": 0.2,
    "hard": 0.3,
}
DEFAULT_DIFFICULTY = "medium"

# After this many unsolvable candidates we give up and hand out an open maze
MAX_ATTEMPTS = 20


def wall_density(difficulty):
    """Fraction of cells to try as walls; unknown difficulty -> medium."""
    return DIFFICULTY_DENSITY.get(difficulty, DIFFICULTY_DENSITY[DEFAULT_DIFFICULTY])


def start_position(maze):
    return 0, 0


def goal_position(maze):
    return len(maze[0]) - 1, len(maze) - 1


def open_maze(width, height):
    """Maze without any walls (always solvable)."""
    if width < 1 or height < 1:
        raise ValueError(f"Maze size must be positive, got {width}x{height}")
    return [PATH * width for _ in range(height)]


def is_passable(maze, x, y):
    return 0 <= y < len(maze) and 0 <= x < len(maze[y]) and maze[y][x] != WALL


def place_random_walls(width, height, density, rng=random):
    """
    Drop floor(width * height * density) walls on random cells.
    Samples are taken with replacement, so duplicates just overwrite each other.
    Start (0, 0) and goal (width-1, height-1) are never walled.
    """
    if width < 1 or height < 1:
        raise ValueError(f"Maze size must be positive, got {width}x{height}")

    cells = [[PATH for _ in range(width)] for _ in range(height)]
    start = (0, 0)
    goal = (width - 1, height - 1)

    total_walls = int(width * height * density)
    for _ in range(total_walls):
        x = rng.randrange(width)
        y = rng.randrange(height)
        if (x, y) != start and (x, y) != goal:
            cells[y][x] = WALL

    return ["".join(row) for row in cells]


def is_maze_solvable(maze):
    """
    Check if there's a path from top-left (0,0) to bottom-right (W-1,H-1).
    Plain DFS with a stack; walls are filtered when popped, not when pushed.
    """
    if not maze or not maze[0]:
        raise ValueError("Cannot check an empty maze")

    height = len(maze)
    width = len(maze[0])
    goal = goal_position(maze)

    stack = [start_position(maze)]
    visited = set()

    while stack:
        x, y = stack.pop()

        if (x, y) in visited or maze[y][x] == WALL:
            continue
        if (x, y) == goal:
            return True

        visited.add((x, y))

        # Tetangga: atas, bawah, kiri, kanan
        if y > 0:
            stack.append((x, y - 1))
        if y < height - 1:
            stack.append((x, y + 1))
        if x > 0:
            stack.append((x - 1, y))
        if x < width - 1:
            stack.append((x + 1, y))

    return False


def generate_maze(difficulty=DEFAULT_DIFFICULTY, width=MAZE_WIDTH, height=MAZE_HEIGHT, rng=None):
    """
    Generate a solvable maze with randomly placed walls.
    Every attempt starts from a fresh grid. If MAX_ATTEMPTS candidates are all
    unsolvable, an open maze is returned instead.
    """
    if rng is None:
        rng = random
    density = wall_density(difficulty)

    for attempt in range(1, MAX_ATTEMPTS + 1):
        print(f"🔄 Generating maze (attempt #{attempt}), difficulty: {difficulty}")
        maze = place_random_walls(width, height, density, rng)
        if is_maze_solvable(maze):
            return maze

    print("⚠️ Max attempts reached, returning an open maze.")
    return open_maze(width, height)
