"""
Core domain layer: enums, models, exceptions and rules.
"""
