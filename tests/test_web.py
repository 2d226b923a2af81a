"""
Debug web interface tests
"""

import asyncio

from aiohttp import test_utils

from circle_seeker.control import Controller
from circle_seeker.motion import TurnDirection
from circle_seeker.web import create_app

from conftest import FakeCamera, FakeLidar, FakeMotor, FixedChoice, make_frame


def fetch(app, path):
    async def go():
        client = test_utils.TestClient(test_utils.TestServer(app))
        await client.start_server()
        try:
            resp = await client.get(path)
            assert resp.status == 200
            return await resp.json()
        finally:
            await client.close()

    return asyncio.run(go())


def make_controller(specs):
    return Controller(
        specs,
        rng=FixedChoice(TurnDirection.RIGHT),
        lidar=FakeLidar(make_frame(overrides={300: 1.2})),
        camera=FakeCamera(),
        motor=FakeMotor(),
    )


def test_status_without_controller():
    assert fetch(create_app(), "/api/status") == {"state": "unknown"}


def test_status_reports_last_command(specs):
    controller = make_controller(specs)
    controller.step()

    status = fetch(create_app(controller), "/api/status")

    assert status["mode"] == "WALL_FOLLOW"
    assert status["turn_direction"] == "NONE"
    assert status["last_command"] == {"linear": specs.linear_velocity, "angular": 0.0}
    assert status["cycles"] == 1
    assert status["running"] is False


def test_sectors(specs):
    controller = make_controller(specs)
    controller.step()

    data = fetch(create_app(controller), "/api/sectors")

    assert data["sectors"]["center"] == 1.2
    assert data["beams"] == 720
    assert data["valid_beams"] == 720


def test_params(specs):
    data = fetch(create_app(make_controller(specs)), "/api/params")

    assert data["linear_velocity"] == specs.linear_velocity
    assert data["right_window"] == {"low": 10, "high": 250}
    assert data["geometry"]["beam_count"] == 720
