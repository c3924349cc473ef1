"""Shared runtime type checking.

Physics inputs arrive from UIs and scripts as plain numbers, so integer
arguments must be accepted wherever a float is annotated.
"""

from beartype import BeartypeConf, beartype

checked = beartype(conf=BeartypeConf(is_pep484_tower=True))
