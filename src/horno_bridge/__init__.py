"""
Horno Shadow Bridge.

Bridges the oven PLC's AWS IoT device shadow into the industrial event log
and lets the front-end read and patch shadow attributes.
"""

__version__ = "1.0.0"
