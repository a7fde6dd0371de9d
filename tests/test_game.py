import logging
import random

import pytest

from floppy.constants import MAX_ROT
from floppy.data_models import EventKind, Phase, Pipe
from floppy.game import FloppyGame
from floppy.score_db import ScoreDatabase


def kinds(game):
    return [e.kind for e in game.events]


def crash(game):
    """Drops the bird onto the ground within one step."""
    game.session.bird.y = 420.0
    game.advance(0.01)


def test_new_game_is_idle(game):
    assert game.phase is Phase.IDLE
    assert game.session.bird.y == 240
    assert game.session.bird.x == 120
    assert game.current_score() == 0
    assert game.best_record() == 0


def test_idle_ticks_do_not_simulate(game):
    game.tick(0)
    game.tick(16)
    game.tick(32)
    assert game.session.bird.y == 240
    assert game.session.pipes == []
    assert game.session.spawn_timer_ms == 0.0


def test_first_flap_starts_running(game):
    game.tick(0)
    game.flap()
    assert game.phase is Phase.RUNNING
    assert game.session.bird.vy == -350.0
    assert game.session.bird.rot == MAX_ROT
    assert kinds(game) == [EventKind.FLAPPED]

    game.tick(16)
    assert game.session.bird.vy == pytest.approx(-350.0 + 1100 * 0.016)


def test_explicit_start_without_flap(game):
    game.start()
    assert game.phase is Phase.RUNNING
    assert game.session.bird.vy == 0.0
    assert game.events == []


def test_start_is_idempotent(game):
    game.start()
    game.session.pipes.append(Pipe(x=300, top=100))
    game.session.score = 3
    game.start()
    game.flap()
    assert game.phase is Phase.RUNNING
    assert len(game.session.pipes) == 1
    assert game.current_score() == 3


def test_death_ends_session_once(game):
    game.start()
    game.session.score = 4
    crash(game)
    assert game.phase is Phase.ENDED
    assert not game.session.bird.alive
    assert kinds(game) == [EventKind.DIED, EventKind.ENDED]

    result = game.events[-1].result
    assert result.score == 4
    assert result.new_best
    assert result.best == 4
    assert game.last_result == result

    for _ in range(5):
        game.advance(0.02)
    assert kinds(game).count(EventKind.ENDED) == 1


def test_nothing_moves_after_end(game):
    game.start()
    crash(game)
    y = game.session.bird.y
    game.tick(0)
    game.tick(30)
    assert game.session.bird.y == y


def test_flap_after_end_is_ignored(game):
    game.start()
    crash(game)
    game.events.clear()
    game.flap()
    assert game.phase is Phase.ENDED
    assert game.events == []


def test_retry_builds_a_fresh_session(game):
    game.start()
    game.session.pipes.extend([Pipe(x=300, top=100), Pipe(x=500, top=120)])
    game.session.score = 7
    game.session.spawner.timer_ms = 900.0
    old = game.session
    crash(game)

    game.retry()
    assert game.session is not old
    assert game.phase is Phase.IDLE
    assert game.current_score() == 0
    assert game.session.pipes == []
    assert game.session.spawn_timer_ms == 0.0
    assert game.session.bird.alive
    assert game.best_record() == 7


def test_retry_only_from_ended(game):
    game.start()
    session = game.session
    game.retry()
    assert game.session is session
    assert game.phase is Phase.RUNNING


def test_best_record_only_increases(db):
    game = FloppyGame(480, 480, store=db, rng=random.Random(3))
    results = []
    for score in (5, 3, 9, 0, 9):
        game.start()
        game.session.score = score
        crash(game)
        results.append(game.last_result)
        game.retry()

    assert [r.best for r in results] == [5, 5, 9, 9, 9]
    assert [r.new_best for r in results] == [True, False, True, False, False]
    assert db.load_best_record() == 9


def test_best_record_loaded_from_store(db):
    db.save_best_record(12)
    game = FloppyGame(480, 480, store=db)
    assert game.best_record() == 12
    game.start()
    game.session.score = 11
    crash(game)
    assert not game.last_result.new_best
    assert game.best_record() == 12


def test_unavailable_store_does_not_break_the_game(tmp_path):
    store = ScoreDatabase(str(tmp_path / "missing" / "scores.db"))
    game = FloppyGame(480, 480, store=store)
    game.start()
    game.session.score = 2
    crash(game)
    assert game.phase is Phase.ENDED
    assert game.best_record() == 2


def test_pause_withholds_ticks(game):
    game.tick(0)
    game.flap()
    game.tick(16)
    bird = game.session.bird
    y, vy = bird.y, bird.vy

    game.toggle_pause()
    assert game.paused
    snap = game.tick(5000)
    assert snap.paused
    game.advance(0.02)
    assert (bird.y, bird.vy) == (y, vy)
    assert game.phase is Phase.RUNNING

    game.toggle_pause(now_ms=5000)
    game.tick(5016)
    assert bird.vy == pytest.approx(vy + 1100 * 0.016)


def test_pause_toggle_works_in_any_phase(game):
    game.toggle_pause()
    game.flap()
    assert game.phase is Phase.RUNNING
    assert game.paused
    game.toggle_pause()
    assert not game.paused


def test_snapshot(game):
    game.start()
    game.session.pipes.append(Pipe(x=300, top=100))
    snap = game.snapshot()
    assert snap.phase is Phase.RUNNING
    assert snap.bird.x == 120 and snap.bird.y == 240
    assert snap.pipes[0].bottom == 240
    assert snap.ground_height == 58
    assert (snap.width, snap.height) == (480, 480)

    game.session.pipes[0].x = 0
    assert snap.pipes[0].x == 300


def test_resize_is_used_for_next_spawn(fixed_random):
    game = FloppyGame(480, 480, rng=fixed_random(1000))
    game.start()
    game.resize(600, 800)
    game.session.spawner.timer_ms = 1399.0
    game.advance(0.01)
    pipe = game.session.pipes[0]
    assert pipe.x == pytest.approx(620 - 1.8)
    assert pipe.top == 800 - 140 - 120
    assert game.snapshot().ground_height == 96


def test_score_never_decreases_during_play():
    game = FloppyGame(480, 640, rng=random.Random(42))
    scores = []
    game.subscribe(lambda e: scores.append(e.score) if e.kind is EventKind.SCORED else None)
    now = 0
    game.tick(now)
    game.flap(now)
    for _ in range(3000):
        now += 16
        bird = game.session.bird
        # Crude autopilot: hop whenever the bird sinks below the middle
        if bird.y > 320 and bird.vy > 0:
            game.flap(now)
        game.tick(now)
        if game.phase is Phase.ENDED:
            break
    assert scores == sorted(scores)
    assert scores == list(range(1, len(scores) + 1))
    assert game.current_score() == len(scores)


def test_session_end_is_logged_with_result(caplog, game):
    caplog.set_level(logging.DEBUG, logger="floppy")
    game.start()
    game.session.score = 6
    crash(game)
    ended = [r for r in caplog.records if r.name == "floppy.game" and hasattr(r, "data")]
    assert ended[-1].data == {"score": 6, "best": 6, "new_best": True}
    died = [r for r in caplog.records if r.name == "floppy.physics_engine"]
    assert died[-1].data["score"] == 6
