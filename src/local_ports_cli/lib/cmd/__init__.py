"""
Command implementations for Local Ports CLI
"""

from .ports import ports_command, summary_command, check_command
from .init import init_command

__all__ = [
    'ports_command',
    'summary_command',
    'check_command',
    'init_command'
]
