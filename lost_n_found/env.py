import logging
import os

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame

from .game import Game
from .grid import Direction, Hint, Solution, Trap
from .round import Outcome, PointerSample
from .settings import TITLE
from .timer import FrameClock
from .xform import grid_to_surface

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    """
    A Gymnasium environment for Lost-n-Found, a real-time hot/cold search game.

    One cell of the grid hides the solution. Clicking any other cell shows
    an arrow towards it, a blank, or a trap that makes the arrows flicker
    the wrong way for a few seconds. Only a handful of cells stay visible
    at once and each fades after a few seconds. Find the solution before
    the round clock runs out to move up a level; run out of time and the
    run is over.

    The action is a pointer sample on the character-cell surface the grid
    is drawn on: [surface_x, surface_y, clicked].
    """
    metadata = {"render_modes": ["rgb_array"]}

    user_guide = (
        "Controls: Move the mouse over the grid and click a cell to reveal it."
    )

    game_description = (
        "Find the hidden cell before time runs out. Arrows point the way, traps scramble them, "
        "and only a few cells stay uncovered at a time."
    )

    # The round clock keeps running between clicks.
    auto_advance = True

    # --- Constants ---
    FPS = 30
    MAX_STEPS = 10000
    WIN_REWARD = 10.0
    LOSE_REWARD = -10.0

    SCREEN_WIDTH = 640
    SCREEN_HEIGHT = 400

    # Pixel size of one surface character cell
    CHAR_W = 6
    CHAR_H = 8
    SURFACE_COLS = SCREEN_WIDTH // CHAR_W
    SURFACE_ROWS = SCREEN_HEIGHT // CHAR_H

    # Colors
    COLOR_BG = (20, 24, 32)
    COLOR_TILE_HIDDEN = (52, 64, 84)
    COLOR_TILE_REVEALED = (92, 108, 130)
    COLOR_HOVER = (255, 200, 0)
    COLOR_TEXT = (230, 240, 255)
    COLOR_TIME_LOW = (255, 90, 90)
    COLOR_OVERLAY = (0, 0, 0, 170)

    GLYPHS = {
        Direction.LEFT: ("<", (120, 200, 255)),
        Direction.UP: ("^", (120, 200, 255)),
        Direction.RIGHT: (">", (120, 200, 255)),
        Direction.DOWN: ("v", (120, 200, 255)),
        "trap": ("*", (255, 110, 200)),
        "solution": ("$", (120, 255, 140)),
    }

    def __init__(self, render_mode="rgb_array"):
        super().__init__()
        self.render_mode = render_mode

        # --- Gymnasium Spaces ---
        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([self.SURFACE_COLS, self.SURFACE_ROWS, 2])

        # --- Pygame Setup ---
        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.SCREEN_WIDTH, self.SCREEN_HEIGHT))
        self.ui_font = pygame.font.SysFont("monospace", 16, bold=True)
        self.glyph_font = pygame.font.SysFont("monospace", 14, bold=True)
        self.banner_font = pygame.font.SysFont("monospace", 40, bold=True)
        self._pre_render_glyphs()

        # --- Game State Initialization ---
        self.clock = None
        self.game = None
        self.steps = 0
        self.score = 0.0

        self.reset()

    def _pre_render_glyphs(self):
        """Pre-renders cell glyphs for faster drawing."""
        self.glyph_surfaces = {}
        for key, (char, color) in self.GLYPHS.items():
            self.glyph_surfaces[key] = self.glyph_font.render(char, True, color)

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.clock = FrameClock()
        self.game = Game(self.np_random, self.clock, self.SURFACE_COLS, self.SURFACE_ROWS)
        self.steps = 0
        self.score = 0.0

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.game.finished:
            return self._get_observation(), 0.0, True, False, self._get_info()

        surface_x, surface_y, clicked = (int(a) for a in action)
        sample = PointerSample(clicked=clicked == 1, surface_x=surface_x, surface_y=surface_y)

        self.clock.advance(1.0 / self.FPS)
        self.steps += 1

        reward = 0.0
        outcome = self.game.tick(sample)
        if outcome is Outcome.WIN:
            reward += self.WIN_REWARD
        elif outcome is Outcome.LOSE:
            reward += self.LOSE_REWARD
        self.score += reward

        terminated = self.game.finished
        truncated = not terminated and self.steps >= self.MAX_STEPS

        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def _get_info(self):
        snapshot = self.game.snapshot()
        return {
            "score": self.score,
            "steps": self.steps,
            "level": snapshot.level,
            "rounds_won": self.game.rounds_won,
            "time_left": snapshot.time_left,
            "confused": self.game.round.confused,
        }

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        snapshot = self.game.snapshot()
        self.screen.fill(self.COLOR_BG)
        self._render_game(snapshot)
        self._render_ui(snapshot)
        if snapshot.outcome is not None:
            self._render_round_over(snapshot)

        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _to_pixels(self, rect):
        return pygame.Rect(
            rect.left * self.CHAR_W,
            rect.top * self.CHAR_H,
            rect.width * self.CHAR_W,
            rect.height * self.CHAR_H,
        )

    def _glyph_for(self, snapshot, x, y):
        content = snapshot.displayed_content(x, y)
        if isinstance(content, Hint):
            return self.glyph_surfaces[content.direction]
        if isinstance(content, Trap):
            return self.glyph_surfaces["trap"]
        if isinstance(content, Solution):
            return self.glyph_surfaces["solution"]
        return None

    def _render_game(self, snapshot):
        """Renders the grid cells, their glyphs and the hover highlight."""
        left, top = snapshot.origin
        for y in range(snapshot.height):
            for x in range(snapshot.width):
                cell = snapshot.cell(x, y)
                rect = self._to_pixels(grid_to_surface(x, y, left, top))

                # The solution is shown once the round is over either way
                is_shown = cell.revealed or (
                    snapshot.outcome is not None and isinstance(cell.content, Solution)
                )
                color = self.COLOR_TILE_REVEALED if is_shown else self.COLOR_TILE_HIDDEN
                pygame.draw.rect(self.screen, color, rect)

                if is_shown:
                    glyph = self._glyph_for(snapshot, x, y)
                    if glyph is not None:
                        self.screen.blit(glyph, glyph.get_rect(center=rect.center))

        if snapshot.hovered is not None and snapshot.outcome is None:
            rect = self._to_pixels(grid_to_surface(*snapshot.hovered, left, top))
            pygame.draw.rect(self.screen, self.COLOR_HOVER, rect.inflate(2, 2), 1)

    def _render_ui(self, snapshot):
        """Renders level and time left."""
        level_surf = self.ui_font.render(f"LEVEL {snapshot.level}", True, self.COLOR_TEXT)
        self.screen.blit(level_surf, (10, 6))

        time_color = self.COLOR_TIME_LOW if snapshot.time_left < 5 else self.COLOR_TEXT
        time_surf = self.ui_font.render(f"TIME {snapshot.time_left:4.1f}", True, time_color)
        self.screen.blit(time_surf, time_surf.get_rect(topright=(self.SCREEN_WIDTH - 10, 6)))

    def _render_round_over(self, snapshot):
        """Renders the semi-transparent overlay and end-of-round message."""
        tint_surface = pygame.Surface((self.SCREEN_WIDTH, self.SCREEN_HEIGHT), pygame.SRCALPHA)
        tint_surface.fill(self.COLOR_OVERLAY)
        self.screen.blit(tint_surface, (0, 0))

        if snapshot.outcome is Outcome.WIN:
            message, color = "FOUND IT!", (100, 255, 100)
        else:
            message, color = "TIME'S UP", self.COLOR_TIME_LOW

        text_surf = self.banner_font.render(message, True, color)
        self.screen.blit(text_surf, text_surf.get_rect(center=(self.SCREEN_WIDTH / 2, self.SCREEN_HEIGHT / 2)))

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        '''
        Sanity-checks spaces, reset and step.
        '''
        print("Running implementation validation...")
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [self.SURFACE_COLS, self.SURFACE_ROWS, 2]

        test_obs = self._get_observation()
        assert test_obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert test_obs.dtype == np.uint8

        obs, info = self.reset()
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(info, dict)
        assert info["level"] == 1

        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(reward, float)
        assert isinstance(term, bool)
        assert isinstance(trunc, bool)
        assert isinstance(info, dict)

        print("Implementation validated successfully")


if __name__ == '__main__':
    # Set up Pygame for human play
    os.environ["SDL_VIDEODRIVER"] = "x11"  # Use 'dummy' for headless, 'x11' or 'windows' for display
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    env = GameEnv(render_mode="rgb_array")
    obs, info = env.reset()

    display_screen = pygame.display.set_mode((env.SCREEN_WIDTH, env.SCREEN_HEIGHT))
    pygame.display.set_caption(TITLE)
    frame_clock = pygame.time.Clock()

    running = True
    while running:
        clicked = 0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                clicked = 1

        mouse_x, mouse_y = pygame.mouse.get_pos()
        action = [
            min(mouse_x // env.CHAR_W, env.SURFACE_COLS - 1),
            min(mouse_y // env.CHAR_H, env.SURFACE_ROWS - 1),
            clicked,
        ]
        obs, reward, terminated, truncated, info = env.step(action)

        surf = pygame.surfarray.make_surface(np.transpose(obs, (1, 0, 2)))
        display_screen.blit(surf, (0, 0))
        pygame.display.flip()

        if terminated or truncated:
            print(f"Game Over! Final Info: {info}")
            pygame.time.wait(2000)
            obs, info = env.reset()

        frame_clock.tick(env.FPS)

    env.close()
