"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the query engine to where graph data is stored:
- Graph storage (text edge-list files)
"""
