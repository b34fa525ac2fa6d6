from .module import HelpPredictorModule
from .registry import PredictorRegistrationError, PredictorRegistry

__all__ = ["HelpPredictorModule", "PredictorRegistrationError", "PredictorRegistry"]
