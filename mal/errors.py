class MalError(Exception):
    """ Base class for all mal errors"""
    pass

class MalParseError(MalError):
    """ Raised when the reader cannot produce a form from its input"""

class MalUnexpectedToken(MalParseError):
    """ Raised when input ends inside a list, or a ')' has no open list"""

class MalSymbolNotFound(MalError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

class MalArgumentError(MalError):
    """ Raised when a primitive or special form gets the wrong shape of arguments"""

class MalArityError(MalArgumentError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class MalTypeError(MalArgumentError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class MalNotCallable(MalError):
    """ Raised when the head of an application is not a function"""

class MalDivisionByZero(MalError, ZeroDivisionError):
    """ Raised by integer division with a zero divisor"""

class MalRecursionError(MalError):
    """ Raised when nested closure calls exceed the configured depth"""
