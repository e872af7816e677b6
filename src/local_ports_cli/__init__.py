"""
Local Ports CLI - report listening and free TCP/UDP ports on the local host
"""

__version__ = "0.1.0"
