"""
Core — detection, generation and persistence, independent of the CLI.
"""
