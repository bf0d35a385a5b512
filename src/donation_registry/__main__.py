from __future__ import annotations

import argparse
import logging
import time

from .core.config import RegistrySettings
from .runtime.server import run


def main() -> None:
    settings = RegistrySettings.from_env()

    p = argparse.ArgumentParser(prog="donation-registry", description="donation-registry: food donation ledger server")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--log-level", default=settings.log_level, choices=["debug", "info", "warning", "error"])
    args = p.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    srv = run(host=args.host, port=args.port, settings=settings, log_level=args.log_level, new_server=True)
    print(srv.url)

    # Block forever (so it behaves like a normal CLI server)
    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
