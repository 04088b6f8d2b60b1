from typing import Dict, List, Tuple

from .config import PARTICLES


def _capitalize_ascii(text: str) -> str:
    if text and "a" <= text[0] <= "z":
        return text[0].upper() + text[1:]
    return text


def strip_particle(display_name: str) -> str:
    for prefix, replacement in PARTICLES:
        if display_name.startswith(prefix):
            return replacement + display_name[len(prefix):]
    return display_name


def sort_key(display_name: str) -> str:
    """
    Key used to alphabetize a "Last, First" name.

    Leading particles are dropped ("van der Berg, Jan" -> "Berg, Jan") or glued
    to the name ("du Pont, Marie" -> "Dupont, Marie"). Only the first character
    is capitalized, and only if it is ASCII. The key is never displayed.
    """
    return _capitalize_ascii(strip_particle(display_name))


def sorted_authors(author_pages: Dict[str, List[int]]) -> List[Tuple[str, List[int]]]:
    # Plain codepoint order; the display name breaks ties between equal keys.
    return sorted(author_pages.items(), key=lambda item: (sort_key(item[0]), item[0]))
