"""src/reqtarget/version.py

Version information for reqtarget.
"""

__version__ = "0.1.0"
