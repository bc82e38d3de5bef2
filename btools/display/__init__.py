"""
Console display and diagnostic helpers: dollar formatting, head/tail
printing and memory reporting.
"""
