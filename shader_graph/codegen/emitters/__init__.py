# GLSL Emitters Package
# Modular handlers for emitting GLSL expressions per NodeKind

from .registry import get_emitter

__all__ = ['get_emitter']
