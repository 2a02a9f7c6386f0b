"""Entry point for running the dartweave API server via ``python main.py``.

Host, port and log level come from :mod:`dartweave.config`, so
``DARTWEAVE_PORT=9000 python main.py`` is enough to move the server.
"""

import uvicorn

from dartweave.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "dartweave.api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
