"""Service layer: use cases orchestrating the domain and outbound ports."""
