"""
Toolkit manager — reconciles installed and available toolkits into
checkbox-ready selection state.
"""

__version__ = "0.1.0"
