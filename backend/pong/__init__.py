from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config, parse_origins

# Handle each session's events in arrival order
socketio = SocketIO(async_mode=None, async_handlers=False)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = parse_origins(flask_app.config.get('CORS_ALLOWED_ORIGINS', '*'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from pong.routes import main
    flask_app.register_blueprint(main)

    from pong.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    # One game per process; handlers and routes find it via app.extensions
    from pong.services.game import GameServer
    game = GameServer(flask_app, socketio)
    flask_app.extensions['pong'] = game
    game.start()

    return flask_app
