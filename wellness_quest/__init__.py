"""Wellness Quest: XP, levels, badges and mood-driven quest suggestions"""

__version__ = "0.2.0"
