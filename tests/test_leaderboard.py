"""
Leaderboard file tests.
"""
import json

import pytest

from game.hub.leaderboard import Leaderboard


class TestLeaderboard:

    def test_missing_file_is_empty(self, tmp_path):
        board = Leaderboard(str(tmp_path / "none.json"))
        assert board.top() == []

    def test_sorted_best_first(self, tmp_path):
        board = Leaderboard(str(tmp_path / "board.json"))
        board.submit("a", "snake", 10)
        board.submit("b", "snake", 30)
        board.submit("c", "goku", 20)

        assert [e["score"] for e in board.top()] == [30, 20, 10]

    def test_keeps_top_entries_only(self, tmp_path):
        board = Leaderboard(str(tmp_path / "board.json"), size=10)
        for score in range(15):
            board.submit("p", "snake", score)

        entries = board.top()
        assert len(entries) == 10
        assert entries[0]["score"] == 14
        assert entries[-1]["score"] == 5

    def test_filter_by_game(self, tmp_path):
        board = Leaderboard(str(tmp_path / "board.json"))
        board.submit("a", "snake", 10)
        board.submit("b", "goku", 300)

        assert [e["username"] for e in board.top(game="snake")] == ["a"]

    def test_file_format(self, tmp_path):
        path = tmp_path / "nested" / "board.json"
        Leaderboard(str(path)).submit("alice", "croc_dentist", 90)

        with open(path) as f:
            data = json.load(f)
        assert data[0]["username"] == "alice"
        assert data[0]["game"] == "croc_dentist"
        assert data[0]["score"] == 90
        assert "date" in data[0]

    @pytest.mark.parametrize("content", [
        '{"leaderboard": []}',
        '[{"username": "a"}]',
        '"scores"',
    ])
    def test_rejects_foreign_json(self, tmp_path, content):
        path = tmp_path / "board.json"
        path.write_text(content)
        board = Leaderboard(str(path))

        with pytest.raises(ValueError):
            board.submit("a", "snake", 10)
        assert path.read_text() == content
