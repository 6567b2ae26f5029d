from swissround.models.competitor.base_competitor import Competitor
from swissround.models.competitor.factory import (
    create_competitor,
    create_competitors,
)

__all__ = [
    "Competitor",
    "create_competitor",
    "create_competitors",
]
