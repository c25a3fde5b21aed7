from ._exceptions import EquivalenceLawError, NotAnElementError, NotASetError
