from flappy_bird.entities import Bird, Obstacle, ObstacleKind
from flappy_bird.scoreboard import Scoreboard


def make_pair(x: float) -> list[Obstacle]:
    return [
        Obstacle(ObstacleKind.UPPER, x, 0, 140, 400, 150.0),
        Obstacle(ObstacleKind.LOWER, x, 700, 140, 580, 150.0),
    ]


def test_each_pair_counted_once() -> None:
    board = Scoreboard()
    bird = Bird(x=150)
    pair = make_pair(9)  # trailing edge at 149
    assert board.count(bird, pair) == 1
    assert board.count(bird, pair) == 0
    assert board.score == 1
    assert pair[0].passed and not pair[1].passed


def test_not_counted_until_trailing_edge_passed() -> None:
    board = Scoreboard()
    bird = Bird(x=150)
    pair = make_pair(10)  # trailing edge exactly at bird.x
    assert board.count(bird, pair) == 0
    pair[0].x -= 0.5
    assert board.count(bird, pair) == 1


def test_removal_keeps_earned_score() -> None:
    board = Scoreboard()
    bird = Bird(x=150)
    obstacles = make_pair(-50) + make_pair(0) + make_pair(400)
    assert board.count(bird, obstacles) == 2
    del obstacles[:4]
    assert board.count(bird, obstacles) == 0
    assert board.score == 2


def test_reset_keeps_best() -> None:
    board = Scoreboard()
    board.score = 7
    assert board.record_best() == 7
    board.reset()
    assert board.score == 0
    assert board.best == 7
    board.score = 3
    assert board.record_best() == 7
