"""
jerseyforge — design composition engine for custom sports jerseys and shorts.

Start with :class:`jerseyforge.configurator.ConfiguratorSession`; it owns the
live DesignState and wires the zone resolver, styling, history, variation,
wizard and composition components together.
"""

__version__ = "0.1.0"
