"""Report adapters, one per results format."""

from .junit import JUnitAdapter
from .mstest import MsTestAdapter
from .nunit import NUnitAdapter
from .nunit3 import NUnit3Adapter
from .xunit import XUnit2Adapter, XUnitAdapter

__all__ = [
    "JUnitAdapter",
    "MsTestAdapter",
    "NUnitAdapter",
    "NUnit3Adapter",
    "XUnitAdapter",
    "XUnit2Adapter",
]
