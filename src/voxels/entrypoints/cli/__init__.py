"""Command-line interface for VOXELS."""
