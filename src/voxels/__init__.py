"""VOXELS applications

Canonical reverse-domain names for Voxels applications, and a D-Bus client
for retrieving an application's declared metadata from the
``voxels.applications`` registry service.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
