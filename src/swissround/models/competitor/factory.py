"""Factory for creating Competitor objects with validation.

This module is the single point of entry for creating competitors, so that
blank names and reserved ids are rejected consistently.
"""

from typing import Iterable, List, Optional

from swissround.models.competitor.base_competitor import Competitor
from swissround.utils import generate_id
from swissround.utils.validation import validate_competitor_id, validate_name


def create_competitor(name: str, competitor_id: Optional[str] = None) -> Competitor:
    """Create a Competitor, generating an id when none is given.

    Args:
        name: Competitor's name
        competitor_id: Explicit id (e.g. a club membership handle)

    Returns:
        A fresh Competitor with empty aggregates

    Raises:
        ValidationError: If the name is blank or the id is blank/reserved

    Example:
        >>> create_competitor("Ana", "p1")
        Competitor(id='p1', name='Ana', score=0.0, ...)
    """
    clean_name = validate_name(name).raise_if_invalid()
    if competitor_id is None:
        competitor_id = generate_id()
    clean_id = validate_competitor_id(competitor_id).raise_if_invalid()
    return Competitor(id=clean_id, name=clean_name)


def create_competitors(names: Iterable[str]) -> List[Competitor]:
    """Create one competitor per name, each with a generated id."""
    return [create_competitor(name) for name in names]
