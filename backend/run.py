import click

from config import Config, parse_addr
from pong import create_app, socketio


@click.command()
@click.option('--addr', default=Config.PONG_ADDR, show_default=True, help='http service address')
@click.option('--debug', is_flag=True, help='Enable Flask debug mode.')
def main(addr, debug):
    """Run the pong game server."""
    host, port = parse_addr(addr)
    app = create_app()
    app.logger.info(f"Server starting at {addr}")
    kwargs = {}
    if socketio.async_mode == 'threading':
        kwargs['allow_unsafe_werkzeug'] = True
    try:
        # Use SocketIO server to enable websockets
        socketio.run(app, host=host, port=port, debug=debug, use_reloader=False, **kwargs)
    finally:
        app.extensions['pong'].shutdown()


if __name__ == '__main__':
    main()
