from __future__ import annotations

import logging
from functools import partial

from helpex.config import HelpexSettings, get_settings
from helpex.extraction.document import extract_examples
from helpex.host.registry import PredictorRegistry
from helpex.prediction.predictor import HelpExamplePredictor

logger = logging.getLogger(__name__)


class HelpPredictorModule:
    """Registers the help example predictor on activation and removes it on deactivation.

    The help document path comes from settings; extraction errors raised during
    eager activation propagate so the host can surface a packaging defect.
    """

    def __init__(self, registry: PredictorRegistry, settings: HelpexSettings | None = None):
        self.settings = settings or get_settings()
        self.registry = registry
        self.predictor: HelpExamplePredictor | None = None

    @property
    def identifier(self) -> str:
        return self.settings.predictor_id

    @property
    def active(self) -> bool:
        return self.predictor is not None

    def build_predictor(self) -> HelpExamplePredictor:
        s = self.settings
        options = dict(
            name=s.predictor_name,
            description=s.predictor_description,
            check_interval=s.cancellation_check_interval,
        )
        if s.lazy_load:
            return HelpExamplePredictor(s.predictor_id, loader=partial(extract_examples, s.help_path), **options)
        return HelpExamplePredictor.from_help_file(s.predictor_id, s.help_path, **options)

    def activate(self) -> HelpExamplePredictor:
        if self.predictor is not None:
            return self.predictor
        logger.info("Activating help predictor help_path=%s lazy=%s", self.settings.help_path, self.settings.lazy_load)
        predictor = self.build_predictor()
        self.registry.register(predictor)
        self.predictor = predictor
        return predictor

    def deactivate(self) -> None:
        if self.predictor is None:
            return
        self.registry.unregister(self.identifier)
        self.predictor = None
