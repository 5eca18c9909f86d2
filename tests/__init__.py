"""
Test package root.

Only this directory carries an __init__.py; subdirectories are plain folders,
so every test module needs a unique file name.
"""
