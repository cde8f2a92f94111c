"""Domain layer for VOXELS.

Contains the application identity rules: the reverse-domain name value, the
application aggregate and its value objects. This package is deliberately
transport-agnostic.

Dependency rule: do not import from `voxels.adapters` or `voxels.entrypoints`.
"""
