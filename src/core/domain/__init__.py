"""Modelos y entidades del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2 / dataclasses) y la
jerarquía de errores. El dominio no conoce ficheros, consola ni CLI.
"""
