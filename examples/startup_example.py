"""Example: logging and tracing an application's startup.

Run with:
    python examples/startup_example.py

Set TRACELOG_LEVEL=debug and TRACELOG_EMOJI=1 to change the shared log's
threshold and markers without touching the code.
"""

import logging
import time

import tracelog
from tracelog import ConsoleLogHandler, Level, Log, Trace, TracelogHandler

logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

# A named log with its own console output, on top of the process-wide
# system-log handler installed by the default registry.
network = Log("Network", level=Level.DEBUG, use_emoji=True)
network.add_handler(ConsoleLogHandler())

startup = Trace("Startup")


def load_config() -> dict[str, str]:
    with startup.span("Load Config"):
        time.sleep(0.05)
        return {"host": "example.com"}


def connect(host: str) -> None:
    startup.begin("Connect")
    network.debug(lambda: f"resolving {host}")
    time.sleep(0.12)
    network.info(f"connected to {host}")
    startup.end("Connect")


def main() -> None:
    # Route third-party stdlib logging through the shared Log as well.
    logging.getLogger("thirdparty").addHandler(TracelogHandler())
    tracelog.logs.set_level(Level.INFO)

    startup.begin("App Startup")
    config = load_config()
    connect(config["host"])
    startup.event("Ready")
    startup.end("App Startup")

    logging.getLogger("thirdparty").warning("legacy module loaded")
    tracelog.info("startup complete")


if __name__ == "__main__":
    main()
