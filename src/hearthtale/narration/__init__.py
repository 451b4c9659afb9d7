from .console import Console
from .narrator import Narrator

__all__ = ["Console", "Narrator"]
