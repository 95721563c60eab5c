"""
Domain layer.

Pure policy objects and decisions. No framework imports, no IO.
"""
