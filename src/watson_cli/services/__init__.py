"""Service command tables and the registry that holds them."""

from __future__ import annotations

from functools import lru_cache

from watson_cli.registry import Registry
from watson_cli.services import (
    assistant_v1,
    assistant_v2,
    compare_comply_v1,
    discovery_v1,
    language_translator_v3,
    natural_language_classifier_v1,
    natural_language_understanding_v1,
    personality_insights_v3,
    speech_to_text_v1,
    text_to_speech_v1,
    tone_analyzer_v3,
    visual_recognition_v3,
    visual_recognition_v4,
)

ROOT_NAME = "watson"
ROOT_SHORT_HELP = "Command-line access to IBM Watson services"
ROOT_LONG_HELP = (
    "Invoke IBM Watson service operations from the command line. Each service is a "
    "subcommand and each service operation is a subcommand of its service."
)

# Registration order is the order services appear in help and plugin metadata.
SERVICE_MODULES = (
    assistant_v1,
    assistant_v2,
    compare_comply_v1,
    discovery_v1,
    language_translator_v3,
    natural_language_classifier_v1,
    natural_language_understanding_v1,
    personality_insights_v3,
    speech_to_text_v1,
    text_to_speech_v1,
    tone_analyzer_v3,
    visual_recognition_v3,
    visual_recognition_v4,
)


def build_registry() -> Registry:
    """Register every service table into a fresh registry and freeze it."""
    registry = Registry(ROOT_NAME, short_help=ROOT_SHORT_HELP, long_help=ROOT_LONG_HELP)
    for module in SERVICE_MODULES:
        registry.register(module.SERVICE)
    return registry.freeze()


@lru_cache(maxsize=1)
def get_registry() -> Registry:
    return build_registry()
