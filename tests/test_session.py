"""
Host / scheduler tests: single active session, teardown and score posting.
"""
import pytest

from game.hub.leaderboard import Leaderboard
from game.hub.render import Frame
from game.hub.session import Hub, ManualDriver, Session
from game.hub.games import snake, space_ranger


class BrokenLeaderboard:
    def submit(self, username, game, score):
        raise OSError("disk full")


class TestSession:

    def test_start_schedules_one_tick_callback(self):
        session = Session(space_ranger.RULES, seed=1).start()
        assert list(session.driver.jobs.values()) == [space_ranger.RULES.tick_interval]

        session.driver.pump(5)
        assert session.world.tick == 5

    def test_every_tick_renders_a_frame(self):
        frames = []
        session = Session(space_ranger.RULES, seed=1, on_frame=frames.append).start()
        session.driver.pump(3)
        # one frame on start, one per tick
        assert len(frames) == 4
        assert all(isinstance(f, Frame) for f in frames)

    def test_final_frame_shows_outcome_before_finish(self):
        seen = []
        session = Session(
            snake.RULES, seed=1,
            on_frame=lambda f: seen.append(("frame", f.state)),
            on_finish=lambda r: seen.append(("finish", r.outcome)),
        ).start()
        session.world.player.attrs["heading"] = (-1, 0)
        session.driver.pump()

        assert seen[-2:] == [("frame", "LOST"), ("finish", "LOST")]

    def test_stop_releases_timer_and_input(self):
        session = Session(space_ranger.RULES, seed=1).start()
        session.press("left")
        result = session.stop()

        assert session.driver.jobs == {}
        assert session.world.input.held == set()
        assert result.outcome == "STOPPED"

        session.driver.pump(3)
        assert session.world.tick == 0

    def test_advance_after_stop_raises(self):
        session = Session(space_ranger.RULES, seed=1).start()
        session.stop()
        with pytest.raises(RuntimeError):
            session.advance()

    def test_same_seed_same_replay(self):
        def replay(seed):
            session = Session(space_ranger.RULES, seed=seed).start()
            for tick in range(200):
                if not session.running:
                    break
                if tick % 7 == 0:
                    session.press("space")
                session.driver.pump()
            return [(e.kind, round(e.x, 6), round(e.y, 6))
                    for e in session.world.all_entities()], session.world.score

        assert replay(42) == replay(42)


class TestHub:

    def test_unknown_game(self):
        hub = Hub()
        with pytest.raises(ValueError):
            hub.launch("pong")

    def test_only_one_active_session(self):
        hub = Hub()
        first = hub.launch("space_ranger", seed=1)
        first.driver.pump(10)
        second = hub.launch("goku", seed=1)

        assert hub.active is second
        assert first.driver.jobs == {}
        assert first.result.outcome == "STOPPED"
        assert second.world.all_entities() == []
        assert second.world.score == 0
        assert second.world.tick == 0

        first.driver.pump(5)
        assert first.world.tick == 10

    def test_finished_game_posts_score(self, tmp_path):
        board = Leaderboard(str(tmp_path / "board.json"))
        results = []
        hub = Hub(player_name="alice", leaderboard=board, on_finish=results.append)

        session = hub.launch("snake", seed=1)
        session.world.player.attrs["heading"] = (-1, 0)
        session.driver.pump()

        assert hub.active is None
        assert results[0].outcome == "LOST"
        assert session.driver.jobs == {}
        entries = board.top()
        assert len(entries) == 1
        assert entries[0]["username"] == "alice"
        assert entries[0]["game"] == "snake"
        assert entries[0]["score"] == 0

    def test_failed_score_post_is_swallowed(self):
        hub = Hub(leaderboard=BrokenLeaderboard())
        session = hub.launch("snake", seed=1)
        session.world.player.attrs["heading"] = (-1, 0)
        session.driver.pump()

        assert hub.last_result.outcome == "LOST"

    def test_unreadable_board_does_not_crash_the_game(self, tmp_path):
        path = tmp_path / "board.json"
        path.write_text('{"leaderboard": []}')
        results = []
        hub = Hub(leaderboard=Leaderboard(str(path)), on_finish=results.append)

        session = hub.launch("snake", seed=1)
        session.world.player.attrs["heading"] = (-1, 0)
        session.driver.pump()

        assert results[0].outcome == "LOST"
        assert hub.active is None
        assert path.read_text() == '{"leaderboard": []}'

    def test_stop_without_session(self):
        assert Hub().stop() is None
