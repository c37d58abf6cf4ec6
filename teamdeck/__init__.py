"""
teamdeck - terminal showcase for the HIPAA Dev Team agent plugin
"""

__version__ = "0.1.0"
