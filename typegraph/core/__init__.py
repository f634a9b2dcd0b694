"""
Core package: settings, scalars, the type registry and the build entry point.
"""
