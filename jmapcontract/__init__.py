"""
jmapcontract - wire contract between a JMAP core and its method plugins.
"""

__version__ = "0.1.0"
