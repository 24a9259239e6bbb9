

class MallowError(Exception):
    """ Base class for all Mallow errors"""
    pass

class MallowReadError(MallowError):
    """ Raised when source text cannot be read into a form"""
    pass

class MallowEvalError(MallowError):
    """ Raised when a form cannot be evaluated"""
    pass

class MallowInvalidSymbol(MallowEvalError):
    """ Raised when an invalid symbol is used as a binding name"""

class MallowUnboundSymbol(MallowEvalError):
    """ Raised when a symbol is used before it is bound"""

class MallowSyntaxError(MallowEvalError):
    """ Raised when a special form is malformed"""

class MallowArityError(MallowEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class MallowTypeError(MallowEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""
