from ._depreciation import deprecated
from ._main import Pipeable

__all__ = ["Pipeable", "deprecated"]
