"""Tests for the fixed-timestep loop driver."""

import asyncio

import pytest

from snake_sim.config import GameConfig
from snake_sim.engine import GameEngine, Phase
from snake_sim.loop import LoopDriver


def _driver(steps_per_second: float = 10.0, **config) -> tuple[LoopDriver, list]:
    config.setdefault("seed", 0)
    engine = GameEngine(GameConfig(**config))
    frames: list = []
    driver = LoopDriver(engine, render=frames.append, steps_per_second=steps_per_second)
    return driver, frames


class TestStepDuration:
    def test_duration_from_rate(self):
        driver, _ = _driver(steps_per_second=10)
        assert driver.step_duration_ms == pytest.approx(100.0)

    def test_rate_clamped_to_two(self):
        driver, _ = _driver(steps_per_second=0.5)
        assert driver.step_duration_ms == pytest.approx(500.0)

    def test_rate_from_config(self):
        engine = GameEngine(GameConfig(steps_per_second=4.0, seed=0))
        driver = LoopDriver(engine)
        assert driver.steps_per_second == 4.0
        assert driver.step_duration_ms == pytest.approx(250.0)

    def test_rate_adjustable_at_runtime(self):
        driver, _ = _driver(steps_per_second=10)
        driver.steps_per_second = 20
        assert driver.step_duration_ms == pytest.approx(50.0)

    def test_rejects_non_positive_rate(self):
        driver, _ = _driver()
        with pytest.raises(ValueError, match="positive"):
            driver.steps_per_second = 0


class TestFrame:
    def test_zero_one_or_many_ticks_per_frame(self):
        driver, frames = _driver(steps_per_second=10)
        driver.engine.start()
        assert driver.frame(50.0) == 0
        assert driver.frame(100.0) == 1
        assert driver.frame(350.0) == 2
        assert driver.accumulator == pytest.approx(50.0)
        assert driver.engine.tick == 3
        assert len(frames) == 3

    def test_renders_once_per_frame_when_idle(self):
        driver, frames = _driver()
        assert driver.frame(1000.0) == 0
        assert driver.engine.tick == 0
        assert len(frames) == 1
        assert frames[0].phase == Phase.IDLE

    def test_paused_frames_do_not_tick(self):
        driver, frames = _driver()
        driver.engine.start()
        driver.engine.pause()
        assert driver.frame(500.0) == 0
        assert frames[-1].phase == Phase.PAUSED

    def test_game_over_stops_the_catch_up(self):
        driver, frames = _driver(
            steps_per_second=10,
            columns=8, rows=8, initial_length=3, start_x=3, start_y=4,
        )
        driver.engine.start()
        ticks = driver.frame(1000.0)
        assert ticks == 5
        assert driver.engine.phase == Phase.GAME_OVER
        assert frames[-1].phase == Phase.GAME_OVER
        assert driver.frame(2000.0) == 0
        assert len(frames) == 2

    def test_resync_drops_backlog(self):
        driver, _ = _driver(steps_per_second=10)
        driver.frame(800.0)
        driver.resync(800.0)
        driver.engine.start()
        assert driver.frame(850.0) == 0
        assert driver.frame(900.0) == 1

    def test_render_receives_snapshot_after_ticks(self):
        driver, frames = _driver(steps_per_second=10)
        driver.engine.start()
        driver.frame(200.0)
        assert frames[-1].tick == driver.engine.tick


class TestAsyncRun:
    @pytest.mark.asyncio
    async def test_runs_until_cancelled(self):
        driver, frames = _driver()
        task = asyncio.create_task(driver.run(frame_interval=0.001))
        await asyncio.sleep(0.05)
        assert not task.done()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert driver.frames > 0
        assert len(frames) == driver.frames

    @pytest.mark.asyncio
    async def test_ticks_follow_the_clock(self):
        driver, _ = _driver(steps_per_second=10)
        driver.engine.start()
        now = [0.0]

        def clock() -> float:
            now[0] += 0.05
            return now[0]

        task = asyncio.create_task(driver.run(clock=clock, frame_interval=0))
        while driver.frames < 4:
            await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert driver.engine.tick >= 1
