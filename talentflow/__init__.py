"""
TalentFlow Backend - recruitment pipeline API with simulated AI agents.
"""

__version__ = "0.1.0"
