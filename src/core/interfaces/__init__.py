"""Interfaces/abstracciones del Core.

Define contratos (Protocol) que cumplen las funciones de transformación.
"""
