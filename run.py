"""Serve the Resource Pack API with Uvicorn.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8000``).  Application settings
come from the variables documented in ``resource_pack_api.app.core.config``.

Usage:
    python run.py
"""
import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "resource_pack_api.app.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=False,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
