"""
Main application entry point for the room booking service.
"""

import uvicorn
from .api.app import create_app

if __name__ == "__main__":
    uvicorn.run(
        "room_booking.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True
    )
