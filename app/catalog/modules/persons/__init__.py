"""
Persons (musicians) module.

- Person model (id + full_name)
- Blueprint built from the shared entity handlers
"""
