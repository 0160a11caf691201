
class SchemeError(Exception):
    """ Base class for all Schemelet errors"""
    pass

class SchemeSyntaxError(SchemeError):
    """ Raised when the token stream is malformed or a form is grammatically invalid"""

class SchemeRuntimeError(SchemeError):
    """ Raised when evaluation fails"""

class SchemeNameError(SchemeError):
    """ Raised when a name is used before it is defined"""

class SchemeArityError(SchemeRuntimeError):
    """ Raised when the number of arguments passed to a builtin is incorrect"""

class SchemeTypeError(SchemeRuntimeError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""
