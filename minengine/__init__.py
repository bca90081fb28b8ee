"""Events, layers, key codes, time steps, meshes and a parallel-for pool for a small rendering engine."""

__version__ = "0.1.0"