"""
Room booking service: reserve shared resources without double-booking.
"""

__version__ = "1.0.0"
