"""Gymnasium environment for Triclaim."""

from .gym_env import TriclaimEnv, render_ascii

__all__ = ["TriclaimEnv", "render_ascii"]
