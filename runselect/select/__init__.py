"""
runselect.select is a collection of strategies for enumerating the candidate runs in the history.

Each strategy offers the candidates one by one to the chain of filters; the strategies range
from walking the whole history (e.g. the most recent run of some status) to single-valued
strategies identifying one specific run (e.g. the run with the given number or permalink).
"""
