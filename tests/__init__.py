"""
Only the root tests directory has an __init__.py.

Test subdirectories are namespace packages (PEP 420), so test module basenames must stay
unique across the whole tree.
"""
