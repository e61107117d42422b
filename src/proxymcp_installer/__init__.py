"""Proxy MCP host installer"""

__version__ = "0.3.0"
