"""Outbound ports (interfaces) that the service layer depends on."""
