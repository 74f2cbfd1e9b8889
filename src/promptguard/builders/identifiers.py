"""Builder for GUIDs."""

from typing import Iterable, Optional
from uuid import UUID

from ..providers import InputProvider, OutputProvider
from ..rules.identifiers import AllowedGuidRule, ExcludedGuidRule, GuidVersionRule, NonEmptyGuidRule
from ..validators.identifiers import UUIDValidator
from .base import BuilderBase


class GuidBuilder(BuilderBase):
    def __init__(self, input_provider: InputProvider, output_provider: OutputProvider, prompt: str):
        super().__init__(UUIDValidator(input_provider, output_provider, prompt))

    def with_non_empty(self, message: Optional[str] = None) -> "GuidBuilder":
        return self._add_rule(NonEmptyGuidRule(message))

    def with_version(self, version: int, message: Optional[str] = None) -> "GuidBuilder":
        return self._add_rule(GuidVersionRule(version, message))

    def with_excluded(self, excluded: Iterable[UUID], message: Optional[str] = None) -> "GuidBuilder":
        return self._add_rule(ExcludedGuidRule(excluded, message))

    def with_allowed(self, allowed: Iterable[UUID], message: Optional[str] = None) -> "GuidBuilder":
        return self._add_rule(AllowedGuidRule(allowed, message))
