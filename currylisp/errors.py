

class LispError(Exception):
    """ Base class for all interpreter errors"""
    pass

class LexError(LispError):
    """ Raised when the lexer meets a character it does not recognise"""
    pass

class ParseError(LispError):
    """ Raised when the parser meets an unexpected or missing token"""
    pass

class UnboundSymbolError(LispError):
    """ Raised when a symbol is looked up before it is bound"""
    pass

class ArityError(LispError):
    """ Raised when the number of arguments passed to a callable is incorrect"""

class LispTypeError(LispError):
    """ Raised when an operation is applied to a value of the wrong variant"""

class LispSyntaxError(LispError):
    """ Raised when a comma or comma-splice is evaluated outside a backquote"""

class DivisionByZeroError(LispError):
    """ Raised on integer division by zero"""

class ReadError(LispError):
    """ Raised when console input cannot be read as the requested value"""

class RecursionDepthError(LispError):
    """ Raised when evaluation nests deeper than the interpreter allows"""
