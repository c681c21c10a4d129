"""
Fleet business rules: assignment validation, driver pay and trip costs.
"""

__version__ = "0.1.0"
