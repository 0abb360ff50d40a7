"""Domain layer — directory categories, error taxonomy, result values.

Pure Python. Nothing here touches the filesystem or the codec; the
infrastructure and service layers build on these types.
"""
