"""Adaptadores de infraestructura (HTTP, ficheros)."""
