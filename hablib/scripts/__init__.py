"""
Console scripts wrapping package and service tasks.
"""
