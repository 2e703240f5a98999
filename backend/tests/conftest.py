import os
import random
import sys
import pytest

# Ensure the backend root (containing the `pong` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from pong import create_app, socketio
from pong.services.game.state import GameState


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ALLOWED_ORIGINS = '*'
    TICK_PERIOD_MS = 16
    TICK_HEARTBEAT_SEC = 0
    RANDOM_SEED = 1234


class FakeConnection:
    """Records sends; optionally fails every send."""

    def __init__(self, sid, fail=False):
        self.sid = sid
        self.fail = fail
        self.sent = []
        self.close_calls = 0

    @property
    def closed(self):
        return self.close_calls > 0

    def send(self, payload):
        if self.fail:
            raise ConnectionResetError(f"{self.sid} went away")
        self.sent.append(payload)

    def close(self):
        self.close_calls += 1


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application
        application.extensions['pong'].shutdown()


@pytest.fixture()
def game(flask_app):
    return flask_app.extensions['pong']


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass


@pytest.fixture()
def rng():
    return random.Random(42)


@pytest.fixture()
def start_state():
    return GameState(
        ball_x=300, ball_y=225, ball_vel_x=1.5, ball_vel_y=1.5,
        paddle1_y=187.5, paddle2_y=187.5, score1=0, score2=0,
    )
