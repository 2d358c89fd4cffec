"""pwnquery: query client for the Have I Been Pwned breach API.

Builds request URLs for each endpoint and decodes the JSON responses
into typed Breach and Paste records.
"""

__version__ = "0.1.0"

from pwnquery.exceptions import PwnQueryError
from pwnquery.executors import ClientConfig, PwnClient
from pwnquery.models import Breach, DataClass, Paste

__all__ = [
    "__version__",
    "Breach",
    "ClientConfig",
    "DataClass",
    "Paste",
    "PwnClient",
    "PwnQueryError",
]
