"""Feature board - suggested, selected and deferred feature sets."""

import logging
from dataclasses import replace

from app_idea_generator.errors import ValidationError
from app_idea_generator.generation.prompt_builder import format_feature_lists
from app_idea_generator.projects.types import FeatureSuggestion, IdeaDescriptor

logger = logging.getLogger(__name__)


class FeatureBoard:
    """
    Three disjoint, ordered sets of feature suggestions.

    A relocated feature is appended to the end of its new set; a removed one
    is gone until the next batch is loaded. Every change recomputes
    `features_text`.
    """

    def __init__(self):
        self.suggested: list[FeatureSuggestion] = []
        self.selected: list[FeatureSuggestion] = []
        self.deferred: list[FeatureSuggestion] = []
        self.features_text = ""

    def load(self, suggestions: list[FeatureSuggestion]) -> None:
        """Replace the board with a fresh batch; previous sets are discarded."""
        self.suggested = list(suggestions)
        self.selected = []
        self.deferred = []
        self._refresh()
        logger.debug(f"Loaded {len(self.suggested)} feature suggestions")

    def _take(self, sources: list[list[FeatureSuggestion]], feature_id: str) -> FeatureSuggestion:
        for source in sources:
            for index, feature in enumerate(source):
                if feature.id == feature_id:
                    return source.pop(index)
        raise ValidationError(f"Unknown feature id: {feature_id}", field="featureId")

    def _move(self, feature_id: str, sources: list, target: list) -> FeatureSuggestion:
        feature = self._take(sources, feature_id)
        target.append(feature)
        self._refresh()
        return feature

    def select(self, feature_id: str) -> FeatureSuggestion:
        """Suggested -> selected."""
        return self._move(feature_id, [self.suggested], self.selected)

    def deselect(self, feature_id: str) -> FeatureSuggestion:
        """Selected -> suggested."""
        return self._move(feature_id, [self.selected], self.suggested)

    def defer(self, feature_id: str) -> FeatureSuggestion:
        """Suggested or selected -> deferred."""
        return self._move(feature_id, [self.suggested, self.selected], self.deferred)

    def restore(self, feature_id: str) -> FeatureSuggestion:
        """Deferred -> suggested."""
        return self._move(feature_id, [self.deferred], self.suggested)

    def remove(self, feature_id: str) -> FeatureSuggestion:
        """Drop a feature from whichever set holds it."""
        feature = self._take([self.suggested, self.selected, self.deferred], feature_id)
        self._refresh()
        return feature

    def _refresh(self) -> None:
        self.features_text = format_feature_lists(self.selected, self.deferred)

    def has_choices(self) -> bool:
        return bool(self.selected or self.deferred)

    def apply_to(self, idea: IdeaDescriptor) -> IdeaDescriptor:
        """Copy of the idea carrying the board's choices.

        An untouched board leaves the idea's own features alone.
        """
        if not self.has_choices():
            return idea
        return replace(
            idea,
            features=self.features_text,
            selected_features=list(self.selected),
            deferred_features=list(self.deferred),
        )
