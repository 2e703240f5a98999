import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Listen address, host:port. Empty host binds all interfaces.
    PONG_ADDR = os.environ.get('PONG_ADDR', ':8080')
    # Comma-separated; '*' accepts any origin
    CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')
    # Game loop period (ms). Clients are tuned for 16.
    TICK_PERIOD_MS = int(os.environ.get('TICK_PERIOD_MS', '16'))
    # Optional: heartbeat interval for tick loop logs (sec). 0 disables.
    TICK_HEARTBEAT_SEC = int(os.environ.get('TICK_HEARTBEAT_SEC', '0'))
    # Optional: seed for ball resets
    RANDOM_SEED = int(os.environ['RANDOM_SEED']) if os.environ.get('RANDOM_SEED') else None


def parse_origins(value):
    if not value or value.strip() == '*':
        return '*'
    return [o.strip() for o in value.split(',') if o.strip()]


def parse_addr(addr):
    """Split 'host:port' (host optional) into (host, port)."""
    host, sep, port = (addr or '').rpartition(':')
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address {addr!r}, expected host:port")
    port_num = int(port)
    if not 0 < port_num < 65536:
        raise ValueError(f"port out of range in {addr!r}")
    return (host or '0.0.0.0'), port_num
