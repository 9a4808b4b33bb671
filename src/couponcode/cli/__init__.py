"""Command line interface for couponcode."""
