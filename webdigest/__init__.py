"""
webdigest - clean, bounded text extraction for agent web tools
"""

__version__ = "0.1.0"
