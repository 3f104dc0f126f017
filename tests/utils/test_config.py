"""
Tests for classic_games.utils.config

Tests configuration and game registry.
"""

import pytest

from classic_games.core.types import GameMode, Player
from classic_games.games import TicTacToe, TwentyFortyEight
from classic_games.utils.config import DEFAULT_CONFIG, GAMES, Config


class TestGameRegistry:
    """GAMES registry tests."""

    def test_contents(self):
        assert GAMES == {"2048": TwentyFortyEight, "tic_tac_toe": TicTacToe}

    def test_game_ids_match_keys(self):
        """Registry keys agree with each game's game_id."""
        for name, game_class in GAMES.items():
            assert game_class().game_id() == name


class TestConfig:
    """Config tests."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.game_name == "2048"
        assert DEFAULT_CONFIG.seed is None
        assert DEFAULT_CONFIG.mode is GameMode.HUMAN_VS_AI
        assert DEFAULT_CONFIG.human_player is Player.X
        assert DEFAULT_CONFIG.max_history is None

    def test_unknown_game(self):
        with pytest.raises(KeyError):
            Config(game_name="chess")

    def test_negative_max_history(self):
        with pytest.raises(ValueError):
            Config(max_history=-3)

    def test_coerces_values(self):
        config = Config(game_name="tic_tac_toe", mode="human_vs_human", human_player=2)
        assert config.mode is GameMode.HUMAN_VS_HUMAN
        assert config.human_player is Player.O

    def test_kwargs_2048(self):
        assert Config(max_history=5).game_kwargs() == {"max_history": 5}

    def test_kwargs_tic_tac_toe(self):
        config = Config(game_name="tic_tac_toe", human_player=Player.O)
        assert config.game_kwargs() == {"mode": GameMode.HUMAN_VS_AI, "human_player": Player.O}
