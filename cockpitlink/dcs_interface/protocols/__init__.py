"""
Protocol implementations for the DCS export script

Currently supported:
- Newline framed JSON over TCP (default)
"""

from .tcp import JsonLineProtocol

__all__ = ['JsonLineProtocol']
