# game_state.py
from maze_data import (
    DEFAULT_DIFFICULTY,
    MAZE_HEIGHT,
    MAZE_WIDTH,
    generate_maze,
    goal_position,
    is_passable,
    start_position,
)

# Arah gerak pemain (dx, dy)
DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


class MazeGame:
    """
    One play session: the current maze, player, goal and difficulty.
    The maze is replaced as a whole on every restart, never edited in place.
    """

    def __init__(self, difficulty=DEFAULT_DIFFICULTY, width=MAZE_WIDTH, height=MAZE_HEIGHT, rng=None):
        self.difficulty = difficulty
        self.width = width
        self.height = height
        self.rng = rng
        self.maze = None
        self.player = (0, 0)
        self.goal = (0, 0)
        self.won = False
        self.moves = 0
        self.restart()

    def restart(self, difficulty=None):
        """Regenerate the maze and reset player/goal"""
        if difficulty is not None:
            self.difficulty = difficulty

        maze = generate_maze(self.difficulty, self.width, self.height, rng=self.rng)

        self.maze = maze
        self.player = start_position(maze)
        self.goal = goal_position(maze)
        self.won = False
        self.moves = 0

        print(f"🎮 New {self.difficulty} maze {self.width}x{self.height}, goal at {self.goal}")

    def move(self, dx, dy):
        """
        Try to move the player by (dx, dy). Blocked moves are ignored.
        Returns True when the player stands on the goal after the move.
        """
        if self.won:
            return False

        new_x = self.player[0] + dx
        new_y = self.player[1] + dy

        if is_passable(self.maze, new_x, new_y):
            self.player = (new_x, new_y)
            self.moves += 1

        if self.player == self.goal:
            self.won = True
            print(f"🎉 Win! Moves: {self.moves}")
            return True

        return False

    def step(self, direction):
        dx, dy = DIRECTIONS[direction]
        return self.move(dx, dy)
