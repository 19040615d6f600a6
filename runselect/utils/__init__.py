"""Utils contains helper modules, that are not directly dependent on the selection.

Utils contains various helper modules and functions, like e.g. helper decorators, logs,
representation of the runs or handling of the environment variables.
"""
