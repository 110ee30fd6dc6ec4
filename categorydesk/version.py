"""
CategoryDesk Client - Version

Single source of the client version string.
"""

VERSION = "1.0.0"
