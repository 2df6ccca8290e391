import random

from gridsnake.body import SnakeBody
from gridsnake.config import Config
from gridsnake.game import GameOverReason, GameSession
from gridsnake.geometry import Heading
from gridsnake.hazards import Hazard, HazardSet


def make_session(**overrides):
    config = Config(seed=123, **overrides)
    session = GameSession(config)
    # keep food and hazards out of the way unless a test places them
    session.food = (59, 59)
    session.hazards = HazardSet()
    return session


def test_initial_state():
    session = GameSession(Config(seed=1))
    assert session.running
    assert session.reason is None
    assert session.body.segments == ((10, 10), (9, 10), (8, 10))
    assert session.body.heading is Heading.RIGHT
    assert len(session.hazards) == 3
    assert session.geometry.contains(session.food)
    assert all(session.geometry.contains(h.cell) for h in session.hazards)


def test_tick_moves_without_collision():
    session = make_session()
    assert session.tick()
    assert session.body.head == (11, 10)
    assert len(session.body) == 3


def test_eating_food_grows_and_respawns():
    session = make_session()
    session.food = session.body.head
    heading = session.body.heading

    assert session.tick()

    assert session.score == 1
    assert len(session.body) == 4
    assert session.body.segments[-1] == (8, 10)
    assert session.body.heading is heading
    assert session.geometry.contains(session.food)


def test_consumption_is_checked_before_the_move():
    session = make_session()
    session.food = (11, 10)
    session.tick()
    # head only arrives on the food during this tick's move
    assert session.score == 0
    session.tick()
    assert session.score == 1


def test_hazard_ends_game_before_moving():
    session = make_session()
    session.hazards = HazardSet([Hazard(session.body.head)])
    before = session.body.segments

    assert not session.tick()

    assert not session.running
    assert session.reason is GameOverReason.HAZARD
    assert session.body.segments == before
    assert session.hazards.active_cells() == [session.body.head]
    assert session.snapshot().hazards == ((session.body.head, True),)


def test_inactive_hazard_is_harmless():
    session = make_session()
    session.hazards = HazardSet([Hazard(session.body.head, active=False)])
    assert session.tick()
    assert session.running


def test_wall_collision_after_leaving_board():
    session = make_session(start_cell=(59, 10))
    assert session.tick()
    assert session.body.head == (60, 10)
    before = session.body.segments

    assert not session.tick()
    assert session.reason is GameOverReason.WALL
    assert session.body.segments == before


def test_self_collision_with_far_segment():
    session = make_session()
    session.body = SnakeBody(
        [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6), (4, 5), (5, 5)], Heading.UP
    )
    assert not session.tick()
    assert session.reason is GameOverReason.SELF


def test_self_collision_with_segment_five():
    session = make_session()
    # segment 5 is the first one that counts
    session.body = SnakeBody([(5, 5), (6, 5), (6, 6), (5, 6), (4, 6), (5, 5)], Heading.UP)
    before = session.body.segments

    assert not session.tick()
    assert session.reason is GameOverReason.SELF
    assert session.body.segments == before


def test_no_self_collision_for_near_segments():
    session = make_session()
    # head coincides with segment 4, which is exempt
    session.body = SnakeBody([(5, 5), (6, 5), (6, 6), (5, 6), (5, 5)], Heading.UP)
    assert session.tick()
    assert session.running


def test_food_and_hazard_on_same_cell():
    session = make_session()
    session.food = session.body.head
    session.hazards = HazardSet([Hazard(session.body.head)])

    assert not session.tick()
    assert session.score == 1
    assert session.body.target_length == 4
    assert len(session.body) == 3
    assert session.reason is GameOverReason.HAZARD


def test_game_over_is_terminal():
    session = make_session()
    session.hazards = HazardSet([Hazard(session.body.head)])
    session.tick()
    snapshot = session.snapshot()

    for _ in range(5):
        assert not session.tick()
    session.request_heading(Heading.UP)

    assert session.snapshot() == snapshot
    assert session.body.heading is Heading.RIGHT


def test_request_heading_ignores_reverse():
    session = make_session()
    session.request_heading(Heading.LEFT)
    session.tick()
    assert session.body.head == (11, 10)

    session.request_heading(Heading.DOWN)
    session.tick()
    assert session.body.head == (11, 11)


def test_snapshot_contents():
    session = make_session()
    session.hazards = HazardSet([Hazard((1, 2)), Hazard((3, 4), active=False)])
    snap = session.snapshot()
    assert snap.head == (10, 10)
    assert snap.length == 3
    assert snap.food == (59, 59)
    assert snap.hazards == (((1, 2), True), ((3, 4), False))
    assert snap.running
    assert snap.reason is None


def test_same_rng_gives_same_spawns():
    a = GameSession(Config(), rng=random.Random(7))
    b = GameSession(Config(), rng=random.Random(7))
    assert a.food == b.food
    assert a.hazards.as_tuples() == b.hazards.as_tuples()
