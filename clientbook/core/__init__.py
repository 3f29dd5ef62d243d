"""
clientbook.core — Constants, pure helpers and logging setup.

Nothing in here imports from other clientbook sub-packages.
"""
