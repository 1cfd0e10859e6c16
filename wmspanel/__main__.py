"""
Entry point for running wmspanel as a module.

Usage:
    python -m wmspanel
"""

import uvicorn

from wmspanel.config import settings


def main():
    """Run the application with uvicorn."""
    uvicorn.run(
        "wmspanel.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
