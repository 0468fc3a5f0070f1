"""
Data models package
"""
