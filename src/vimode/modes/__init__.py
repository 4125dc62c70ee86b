"""Mode resolvers, the mode manager, and the operator engine."""

from .base_mode import ModeResolver, PendingInput
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .visual_mode import VisualMode
from .mode_manager import ModeManager
from .operator_pipeline import OperatorPipeline, OperatorPlan

__all__ = [
    "ModeResolver",
    "PendingInput",
    "NormalMode",
    "InsertMode",
    "VisualMode",
    "ModeManager",
    "OperatorPipeline",
    "OperatorPlan",
]
