"""Simulation pieces of a circular-arena shooter: arena, player, enemies, boss, bullets and power-ups."""

__version__ = "0.1.0"