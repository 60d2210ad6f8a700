class EtaError(Exception):
    """ Base class for all Eta errors"""
    pass

class EtaUndefinedSymbol(EtaError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""
    pass

class EtaTypeMismatch(EtaError):
    """ Raised when a form or builtin receives an operand of the wrong shape"""

class EtaImproperListAccess(EtaError):
    """ Raised when the head or rest of the empty list is requested"""

class EtaNotCallable(EtaError):
    """ Raised when a non-function value is applied"""

class EtaArityMismatch(EtaError):
    """ Raised when a closure receives fewer arguments than it names"""

class EtaUnboundAssignment(EtaError):
    """ Raised when set targets a symbol with no existing binding"""

class EtaEmptyBody(EtaError):
    """ Raised when a block has no expressions to evaluate"""

class EtaStackExhausted(EtaError):
    """ Raised when non-tail recursion runs out of Python stack"""

class EtaSyntaxError(EtaError):
    """ Raised when the reader cannot parse its input"""
