from .interpreter import CommandInterpreter
from .tokens import TokenStream

__all__ = ["CommandInterpreter", "TokenStream"]
