from typing import Optional
import numpy as np
import gymnasium as gym

from .display import render_game
from .engine import GameEngine
from .game.state import GameState
from .models.enums import Outcome, PatternSet, Phase, Role
from .models.position import Position, TOTAL_POSITIONS

PHASE_INDEX = {
    Phase.SECOND_PLACES: 0,
    Phase.FIRST_PLACES: 1,
    Phase.THIRD_REMOVES: 2,
}

CELL_CODES = {
    None: 0,
    Role.UNO: 1,
    Role.TRES: 2,
}

WINNER = {
    Outcome.UNO_WINS: Role.UNO,
    Outcome.TRES_WINS: Role.TRES,
    Outcome.DOS_WINS: Role.DOS,
}


class TresUnoDosEnv(gym.Env):
    """Every step is one ply by whichever role the phase names."""

    metadata = {"render_modes": ["human", "ansi"]}

    def __init__(self, patterns: PatternSet = PatternSet.CANONICAL, render_mode: Optional[str] = None):
        super().__init__()
        self.engine = GameEngine(patterns=patterns, enable_logging=False)
        self.render_mode = render_mode

        self.action_space = gym.spaces.Discrete(TOTAL_POSITIONS)
        # 16 cells followed by the phase index
        self.observation_space = gym.spaces.Box(low=0, high=2, shape=(TOTAL_POSITIONS + 1,), dtype=np.int8)
        self.reward_win = 100
        self.reward_lose = -100
        self.reward_step = 0
        self.state: GameState = self.engine.new_game()

    def action_mask(self) -> np.ndarray:
        mask = np.zeros(TOTAL_POSITIONS, dtype=np.int8)
        for pos in self.engine.legal_moves(self.state):
            mask[pos.index] = 1
        return mask

    def reset(self, seed=None, options=None):
        super().reset(seed=seed, options=options)
        self.state = self.engine.new_game()
        return self._get_obs(), self._get_info()

    def _get_obs(self):
        obs = np.zeros(TOTAL_POSITIONS + 1, dtype=np.int8)
        for index in range(TOTAL_POSITIONS):
            obs[index] = CELL_CODES[self.state.owner_of(Position.from_index(index))]
        obs[TOTAL_POSITIONS] = PHASE_INDEX[self.state.phase]
        return obs

    def _get_info(self):
        info = {}
        info["action_mask"] = self.action_mask()
        info["phase"] = self.state.phase.value
        info["outcome"] = self.engine.outcome(self.state).value
        return info

    def step(self, action):
        if self.state.terminal:
            raise ValueError("Game is over; call reset()")
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action}")

        actor = self.state.current_role
        if not self.engine.try_move(self.state, Position.from_index(int(action))):
            raise ValueError(f"Invalid action: {action}")

        reward = self.reward_step
        terminated = self.state.terminal
        if terminated:
            winner = WINNER[self.engine.outcome(self.state)]
            reward = self.reward_win if winner is actor else self.reward_lose

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), reward, terminated, False, self._get_info()

    def render(self):
        text = render_game(self.state, self.engine, color=False)
        if self.render_mode == "ansi":
            return text
        print(text)


if __name__ == "__main__":
    env = TresUnoDosEnv()
    obs, info = env.reset(seed=0)
    action = int(np.flatnonzero(info["action_mask"])[0])
    print(env.step(action))
