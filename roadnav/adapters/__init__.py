"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to:
- Graph files (poly text format, OSM XML)
- Path-finding algorithms (Dijkstra)
"""
