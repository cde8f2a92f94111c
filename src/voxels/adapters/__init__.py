"""Adapters implementing VOXELS' outbound ports."""
