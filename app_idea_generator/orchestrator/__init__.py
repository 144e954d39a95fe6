"""Orchestrator package - the project view and document bookkeeping."""

from app_idea_generator.orchestrator.features import FeatureBoard
from app_idea_generator.orchestrator.orchestrator import Orchestrator
from app_idea_generator.orchestrator.states import ViewState

__all__ = ["FeatureBoard", "Orchestrator", "ViewState"]
