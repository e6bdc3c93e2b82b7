#!/usr/bin/env python
"""Run the Bunseki web application."""

import uvicorn

from bunseki import Settings

if __name__ == "__main__":
    settings = Settings.from_env()
    uvicorn.run(
        "web.app:app",
        host="127.0.0.1",
        port=8000,
        log_level=settings.log_level.lower(),
        reload=True,  # Enable for development
    )
