"""Smart Home Automation - command-line device simulator"""

__version__ = '1.0.0'
