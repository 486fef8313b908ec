"""Tests for the Snake module."""

import pytest

from snake_sim.snake import Direction, Snake


class TestDirection:
    def test_vectors(self):
        assert Direction.UP.value == (0, -1)
        assert Direction.RIGHT.dx == 1
        assert Direction.DOWN.dy == 1

    def test_opposites(self):
        assert Direction.LEFT.opposite is Direction.RIGHT
        assert Direction.UP.is_opposite(Direction.DOWN)
        assert not Direction.UP.is_opposite(Direction.LEFT)
        assert not Direction.UP.is_opposite(Direction.UP)

    def test_from_vector(self):
        assert Direction.from_vector(0, 1) is Direction.DOWN
        assert Direction.from_vector(1, 1) is None
        assert Direction.from_vector(0, 0) is None
        assert Direction.from_vector(2, 0) is None


class TestSnakeInit:
    def test_body_extends_opposite_to_direction(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert list(snake.body) == [(5, 5), (4, 5), (3, 5)]

    def test_body_extends_below_when_facing_up(self):
        snake = Snake(5, 5, Direction.UP, length=3)
        assert list(snake.body) == [(5, 5), (5, 6), (5, 7)]

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake(0, 0, length=0)


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake(5, 5)
        assert snake.next_head(Direction.UP) == (5, 4)
        assert snake.head == (5, 5)

    def test_push_and_drop(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        snake.push_head((6, 5))
        assert len(snake) == 4
        assert snake.drop_tail() == (3, 5)
        assert snake.head == (6, 5)

    def test_occupies(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert snake.occupies(3, 5)
        assert not snake.occupies(6, 5)
