"""Hexagonal grid edge and vertex directions, angles, direction ways and
axial to doubled or offset coordinate conversions."""

__version__ = "0.1.0"

__all__ = ["angles", "conversions", "edge_direction", "vertex_direction", "way"]