"""Entrypoints (inbound adapters) for VOXELS.

Expose the application to the outside world through the CLI. Parse and
validate inputs, call the service layer, and present results.

Dependency rule: may import `voxels.service_layer` and `voxels.bootstrap`;
avoid importing `voxels.adapters` directly.
"""
