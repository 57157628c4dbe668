"""
AdPulse
=======
Backend de analytics de revenue para monetización de apps.
"""

__version__ = "1.0.0"
