"""Run the API with uvicorn: ``python -m ostransform``.

Env:
  HOST   bind address (default 0.0.0.0)
  PORT   port (default 3000)
"""
from __future__ import annotations

import logging
import os

import uvicorn

from ostransform.main import app


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    logging.getLogger(__name__).info("OS Transform API running on %s:%s (health: /health)", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
