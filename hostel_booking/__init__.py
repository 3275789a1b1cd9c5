"""
Client library for the hostel booking platform API.

Wraps the deposit, room, and booking endpoints and coordinates the
deposit-paid reservation flow.
"""

__version__ = "1.0.0"
