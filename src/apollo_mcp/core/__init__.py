"""Core logic — API client, errors, input schemas, and response shaping.

This module is framework-agnostic. It has no dependency on MCP, FastMCP,
or any server framework. Both the FastMCP server and the command-line
tool import from here.
"""
