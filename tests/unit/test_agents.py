"""
Unit tests for automated agents.
"""
import numpy as np
from agents import RandomAgent
from minesweeper import EASY, MinesweeperEnv


class TestBaseAgentHelpers:
    """Test action conversions shared by all agents."""

    def test_action_round_trip(self) -> None:
        agent = RandomAgent(6, 6)
        assert agent.describe_action(agent.reveal_action(2, 3)) == ("reveal", 2, 3)
        assert agent.describe_action(agent.flag_action(5, 0)) == ("flag", 5, 0)

    def test_mask_from_observation(self) -> None:
        agent = RandomAgent.for_difficulty(EASY)
        obs = np.full((6, 6), -1, dtype=np.int8)
        obs[0, 0] = -2
        obs[1, 1] = 3
        mask = agent.get_valid_actions_from_obs(obs)
        assert mask.shape == (72,)
        assert not mask[0] and mask[36]
        assert not mask[7] and not mask[36 + 7]


class TestRandomAgent:
    """Test random action selection."""

    def test_only_reveals_hidden_cells(self) -> None:
        agent = RandomAgent(6, 6, seed=0)
        obs = np.full((6, 6), 0, dtype=np.int8)
        obs[4, 2] = -1
        for _ in range(10):
            assert agent.select_action(obs) == 4 * 6 + 2

    def test_flags_only_when_enabled(self) -> None:
        obs = np.full((6, 6), -1, dtype=np.int8)
        plain = RandomAgent(6, 6, seed=1)
        flagging = RandomAgent(6, 6, seed=1, use_flags=True)
        assert all(plain.select_action(obs) < 36 for _ in range(50))
        assert any(flagging.select_action(obs) >= 36 for _ in range(50))

    def test_no_valid_actions_returns_zero(self) -> None:
        agent = RandomAgent(6, 6, seed=0)
        assert agent.select_action(np.zeros((6, 6), dtype=np.int8)) == 0

    def test_plays_game_to_completion(self) -> None:
        env = MinesweeperEnv("easy")
        agent = RandomAgent.for_difficulty(env.session.difficulty, seed=4)
        obs, _ = env.reset(seed=4)
        done = False
        steps = 0
        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            obs, _, done, _, info = env.step(action)
            steps += 1
        assert info["game_state"] in ("WON", "LOST")
        assert steps <= 32
