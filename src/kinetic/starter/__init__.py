"""Starter scenes for kinetic."""

from .demos import simple_scene, solar_system

__all__ = ["simple_scene", "solar_system"]
