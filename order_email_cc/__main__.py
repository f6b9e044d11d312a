"""Serve the CC admin API: ``python -m order_email_cc``.

The SQL user-meta table is created on startup from
``EMAIL_CC_ADMIN_DATABASE_URL``.
"""

from __future__ import annotations

import uvicorn

from .config import Settings
from .logging import setup_logging


def main() -> None:
    settings = Settings()
    setup_logging(json=settings.log_json, level=settings.log_level)

    uvicorn.run(
        "order_email_cc.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
