"""Bootstrap (composition root) for VOXELS.

Assembles the application at runtime: reads ``voxels.toml``, picks the bus to
talk to and wires the dbus-fast connector into the service-layer
`RemoteApplicationClient`.

Import rules:
- Entry points import *this* package (not adapters/interfaces directly).
- This package may import: `voxels.adapters`, `voxels.service_layer`,
  `voxels.interfaces`, `voxels.domain`, and `voxels.config`.
- Inner layers must not import `voxels.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_connector

__all__ = ["AppContainer", "bootstrap", "build_connector"]
