"""
Core package: configuration, dependency injection and rating arithmetic
"""
