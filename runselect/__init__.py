"""Runselect is a lightweight engine selecting a run out of the history of a job

Runselect picks already completed runs (e.g. builds) from the ordered history of the job,
such as "the last stable run" or "the run whose parameters match X", without the caller
knowing how the candidates are enumerated or filtered.

Runselect consists of set of selectors, that enumerate the candidate runs from the history,
and set of filters, that decide whether the candidate is acceptable. The state of the
selection (variables, last matched run) is carried by the context of the selection.

Runselect currently exists as library and CLI application.
"""
from __future__ import annotations

import importlib.metadata

__version__ = importlib.metadata.version("runselect")
