"""
scratch — push and pull short-lived files from the command line.
"""

__version__ = '0.3.0'

# Every dataplane path lives under this segment: <endpoint>/scratch/<action>
PRODUCT = 'scratch'

# Control-plane host used only by `scratch bootstrap`.
BOOTSTRAP_HOST = 'https://kilobytetools.io'
