"""CPU ray caster with Phong shading, shadows, primitive shapes and a pygame viewer."""

__version__ = "0.1.0"