"""
Statistical helpers: sample percentiles and rolling-window statistics.
"""
