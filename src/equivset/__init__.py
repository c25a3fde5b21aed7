from .basic_set import BasicSet
from .element import Element, OrderedPair
from .elements import Float, Integer, Text
from .exceptions import EquivalenceLawError, NotAnElementError, NotASetError
from .extended_set import ExtendedSet
from .laws import Law, check_equivalence, reflexive, symmetric, transitive
