import numpy as np
import pytest

from helpers import TRES_CELLS, UNO_CELLS
from tresunodos.environment import TresUnoDosEnv
from tresunodos.models import Outcome, PatternSet, Position


def idx(x, y):
    return Position(x, y).index


def test_reset_gives_empty_board_and_full_mask():
    env = TresUnoDosEnv()
    obs, info = env.reset(seed=0)
    assert obs.shape == (17,)
    assert obs.dtype == np.int8
    assert env.observation_space.contains(obs)
    assert not obs.any()
    assert info["action_mask"].sum() == 16
    assert info["phase"] == "second_places"
    assert info["outcome"] == Outcome.IN_PROGRESS.value


def test_step_places_and_advances_phase():
    env = TresUnoDosEnv()
    env.reset()
    obs, reward, terminated, truncated, info = env.step(idx(2, 2))
    assert obs[idx(2, 2)] == 2
    assert obs[16] == 1
    assert reward == 0
    assert not terminated and not truncated
    assert info["action_mask"][idx(2, 2)] == 0

    obs, *_ = env.step(idx(1, 1))
    assert obs[idx(1, 1)] == 1
    assert obs[16] == 2


def test_observations_stay_inside_the_space():
    env = TresUnoDosEnv()
    assert env.observation_space.high.max() == 2
    obs, _ = env.reset()
    for action in (idx(2, 2), idx(1, 1), idx(2, 2)):
        obs, *_ = env.step(action)
        assert env.observation_space.contains(obs)
    assert obs.max() == 1


def test_removal_mask_marks_occupied_cells_only():
    env = TresUnoDosEnv()
    env.reset()
    env.step(idx(2, 2))
    _, _, _, _, info = env.step(idx(1, 1))
    assert np.flatnonzero(info["action_mask"]).tolist() == sorted([idx(1, 1), idx(2, 2)])


def test_illegal_actions_raise():
    env = TresUnoDosEnv()
    env.reset()
    env.step(idx(2, 2))
    with pytest.raises(ValueError):
        env.step(idx(2, 2))
    with pytest.raises(ValueError):
        env.step(16)
    env.step(idx(1, 1))
    with pytest.raises(ValueError):
        env.step(idx(3, 3))


def test_winning_move_is_rewarded():
    env = TresUnoDosEnv()
    env.reset()
    actions = [idx(3, 3), idx(1, 1), idx(3, 3),
               idx(3, 3), idx(1, 2), idx(3, 3),
               idx(3, 3), idx(1, 3), idx(3, 3),
               idx(3, 3)]
    for action in actions:
        _, reward, terminated, _, _ = env.step(action)
        assert not terminated
    _, reward, terminated, _, info = env.step(idx(1, 4))
    assert terminated
    assert reward == env.reward_win
    assert info["outcome"] == Outcome.UNO_WINS.value
    with pytest.raises(ValueError):
        env.step(idx(2, 2))


def test_filling_the_board_loses_for_the_placer():
    env = TresUnoDosEnv(patterns=PatternSet.REDUCED)
    env.reset()

    def first_free(candidates):
        return next(p for p in candidates if env.state.is_free(p))

    for cycle in range(14):
        tres = first_free(TRES_CELLS)
        env.step(tres.index)
        uno = first_free(UNO_CELLS)
        env.step(uno.index)
        env.step((uno if cycle % 2 == 0 else tres).index)
    env.step(first_free(TRES_CELLS).index)
    _, reward, terminated, _, info = env.step(first_free(UNO_CELLS).index)
    assert terminated
    assert reward == env.reward_lose
    assert info["outcome"] == Outcome.DOS_WINS.value


def test_render_ansi_returns_text():
    env = TresUnoDosEnv(render_mode="ansi")
    env.reset()
    env.step(idx(2, 2))
    text = env.render()
    assert "[T]" in text
    assert "Uno's Turn" in text
