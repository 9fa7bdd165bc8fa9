"""
Entry point for running the application as a module.
"""

import uvicorn

from .api.app import create_app

if __name__ == "__main__":
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
