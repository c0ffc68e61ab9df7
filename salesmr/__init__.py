"""
Map/reduce style sales analytics over the retail and warehouse sales CSV.
"""

__version__ = "0.1.0"
