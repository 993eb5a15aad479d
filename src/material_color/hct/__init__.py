from .cam16 import Cam16
from .hct import Hct
from .viewing_conditions import ViewingConditions

__all__ = ["Cam16", "Hct", "ViewingConditions"]
