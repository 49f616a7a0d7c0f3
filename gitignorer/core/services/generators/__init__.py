"""
Generators — produce config files from detected project context.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile`` instance.
"""
