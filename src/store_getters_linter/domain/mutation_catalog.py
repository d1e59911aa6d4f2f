"""Catalog of in-place sequence methods."""

from store_getters_linter.domain.constants import MUTATING_SEQUENCE_METHODS


class MutationCatalog:
    """Fixed set of method names that mutate an ordered collection in place."""

    METHODS: frozenset[str] = MUTATING_SEQUENCE_METHODS

    @classmethod
    def is_mutating(cls, name: str | None) -> bool:
        return name in cls.METHODS
