"""
Wa-Tor Simulation

A deterministic, headless predator-prey simulator on a toroidal sea.
Fish and sharks move, feed, starve and breed one tick at a time.

Architecture: the engine is the source of truth. Renderers consume its
snapshots and change log.
"""

__version__ = "0.1.0"
