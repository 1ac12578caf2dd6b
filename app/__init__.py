"""
DevHR API - contractor engagements, day-off tracking and monthly invoicing.
"""

__version__ = "1.0.0"
