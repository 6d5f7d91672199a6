import os

from dotenv import load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


def get_port() -> int:
    load_dotenv()
    raw_port = (os.getenv("PORT") or "").strip()
    if not raw_port:
        return DEFAULT_PORT

    try:
        port = int(raw_port)
    except ValueError:
        port = 0
    if not 1 <= port <= 65535:
        raise RuntimeError(f"PORT must be an integer between 1 and 65535, got '{raw_port}'")
    return port
