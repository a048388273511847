"""
Genres module.

- Genre model (id + name)
- Blueprint built from the shared entity handlers
"""
