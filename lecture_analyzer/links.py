from typing import Iterable, List

from .config import Config


def suggest_links(keywords: Iterable[str], template: str = Config.SEARCH_URL) -> List[str]:
    """One search URL per keyword (spaces become '+')."""
    return [template.format(k.replace(" ", "+")) for k in keywords]
