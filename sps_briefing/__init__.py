"""
SPS Dispatch Briefing Engine.

Assembles operational dispatch briefings for a target community from
geocoding, driving-route and point-of-interest data sources.
"""

__version__ = "1.0.0"
