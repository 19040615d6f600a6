"""
runselect.filter is a collection of predicates deciding whether the candidate run is acceptable.

Filters are consulted in the configured order and the first rejection ends the evaluation of
the candidate; filters can be further composed by logical connectives (and, or, not).
"""
