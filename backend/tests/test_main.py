"""
Tests for main.py - the headless simulation runner.
"""

import os
import sys
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import run_simulation, main  # noqa: E402


class TestRunSimulation:
    def test_summary_fields(self):
        run = run_simulation(player_key="random", max_rounds=50, seed=1)
        summary = run.summary()

        assert summary["player"] == "random"
        assert summary["rounds"] <= 50
        assert summary["history_length"] == len(run.history)
        assert summary["length"] == 4 + summary["final_score"]
        assert summary["is_over"] or summary["rounds"] == 50

    def test_history_starts_with_initial_state(self):
        run = run_simulation(max_rounds=5, seed=2)
        assert run.history[0].round_number == 0
        assert run.history[0].snake == ((3, 0), (2, 0), (1, 0), (0, 0))
        assert [s.round_number for s in run.history] == sorted(s.round_number for s in run.history)

    def test_same_seed_same_game(self):
        first = run_simulation(player_key="greedy", max_rounds=200, seed=7)
        second = run_simulation(player_key="greedy", max_rounds=200, seed=7)

        assert [s.snake for s in first.history] == [s.snake for s in second.history]
        assert first.summary()["final_score"] == second.summary()["final_score"]
        assert first.game_id != second.game_id

    def test_greedy_scores(self):
        run = run_simulation(player_key="greedy", max_rounds=300, seed=3)
        assert run.summary()["final_score"] > 0

    def test_unknown_player(self):
        with pytest.raises(ValueError):
            run_simulation(player_key="nobody")

    def test_realtime_uses_tick_scheduler(self):
        run = run_simulation(player_key="greedy", max_rounds=3, seed=4, realtime=True)

        assert len(run.history) == 4
        assert run.engine.scheduler.scheduler.is_running is False


class TestMainCli:
    def test_main_prints_summary(self, capsys):
        with patch.object(sys, "argv", ["main.py", "--player", "greedy", "--max_rounds", "20", "--seed", "1", "--show_board"]):
            main()
        out = capsys.readouterr().out
        assert "Simulation Result Summary" in out
        assert '"player": "greedy"' in out
