"""
ASGI Entry Point for the logoutline API.

Loads `.env` before building the app so settings read at import time see it.

Usage
-----
    $ python -m logoutline.api.server
    $ uvicorn logoutline.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from logoutline.api.app import create_app

load_dotenv(dotenv_path=Path(".env"))

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    uvicorn.run(
        "logoutline.api.server:app",
        host="127.0.0.1",
        port=8000,
        reload=False,
        log_level="info",
    )


if __name__ == "__main__":
    main()
