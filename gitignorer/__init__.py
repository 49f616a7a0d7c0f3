"""
gitignorer — detect a project's ecosystems and write a matching .gitignore.
"""

__version__ = "0.1.0"
