"""
DI Network Manager

Generic network-request abstraction over interchangeable HTTP backends,
with resource services and view-models composed through constructor
injection.
"""

__version__ = "0.1.0"
