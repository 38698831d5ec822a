"""Runtime type enforcement shared by every public callable.

beartype is configured with the PEP 484 implicit numeric tower so that an
``int`` is accepted wherever a ``float`` is annotated (fake clocks and
hand-written sample lists are usually integers).
"""

from beartype import BeartypeConf, beartype

checked = beartype(conf=BeartypeConf(is_pep484_tower=True))
