"""
Infrastructure layer: persistence adapters for the travel store.
"""
