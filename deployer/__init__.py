"""Deployment SPI primitives: artifact coordinates and app deployment identity."""
