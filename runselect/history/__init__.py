"""Host model of the jobs and their histories of runs.

The selection only reads the history of the jobs; the jobs are either held in memory
(when the selection is embedded in other tools) or loaded from the YAML files (when the
selection is run from the command line).
"""
