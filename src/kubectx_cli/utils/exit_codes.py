"""
Exit codes for kubectx-cli.

Both tools keep the historical contract: 0 on success and 1 on any handled
error. Usage errors, missing history and unknown names share the same code.
"""

# Any handled error (unknown name, no previous selection, bad arguments, ...)
ERROR_GENERAL = 1
