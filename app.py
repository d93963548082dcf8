import logging
import os
import socket
from pathlib import Path

from edu_console.logging_config import configure_logging
from edu_console.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("edu_console.app")

CONFIG_ROOT = Path(os.getenv("EDU_CONSOLE_CONFIG", "config"))

app = create_dash_app(CONFIG_ROOT)
server = app.server


def port_is_free(port: int, host: str = "localhost") -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        return s.connect_ex((host, port)) != 0


def pick_port(preferred: int, attempts: int = 100) -> int:
    """First free port in [preferred, preferred + attempts); falls back to preferred."""
    for port in range(preferred, preferred + attempts):
        if port_is_free(port):
            return port
    return preferred


def main() -> None:
    preferred = int(os.getenv("PORT", "8050"))
    port = pick_port(preferred)
    debug = os.getenv("DEBUG", "0") == "1"

    if port != preferred:
        logger.warning("Preferred port taken", extra={"preferred_port": preferred, "port": port})
    logger.info(
        "Starting education console",
        extra={"config_root": str(CONFIG_ROOT), "port": port, "debug": debug},
    )

    app.run(host="0.0.0.0", port=port, debug=debug)


if __name__ == "__main__":
    main()
