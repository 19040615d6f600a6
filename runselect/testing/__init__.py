"""Helper functions for testing the selection, e.g. from the command line interface"""
