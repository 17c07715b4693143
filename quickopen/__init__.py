import importlib.metadata
import warnings

from quickopen.models import SearchResult, Substring, TokenMatch
from quickopen.search import FuzzySearch

try:
    __version__ = importlib.metadata.version(__name__)
except Exception as e:
    warnings.warn(f"Could not determine version of {__name__}\n{e!s}", stacklevel=2)
    __version__ = "unknown"

__all__ = [
    "FuzzySearch",
    "SearchResult",
    "Substring",
    "TokenMatch",
    "__version__",
]
