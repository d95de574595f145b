# storefront/domain/labels.py
from typing import Dict, Iterable, List, Tuple

UNCATEGORIZED = "Uncategorized"
UNBRANDED = "Unbranded"


def merge_labels(
    stored: Iterable[Tuple[str, str | None]],
    derived: Iterable[str],
) -> List[Dict[str, str]]:
    """
    Laczy etykiety zapisane w rejestrze z wartosciami distinct z produktow.

    stored - pary (name, label) z tabeli categories/brands
    derived - nazwy wystepujace w polu produktu

    Przy kolizji nazw wygrywa wpis zapisany. Wynik posortowany po nazwie.
    """
    merged: Dict[str, Dict[str, str]] = {}

    for name in derived:
        if name:
            merged[name] = {"name": name, "label": name}

    for name, label in stored:
        merged[name] = {"name": name, "label": label or name}

    return [merged[k] for k in sorted(merged)]


def label_names(entries: Iterable[Dict[str, str]]) -> set[str]:
    return {e["name"] for e in entries}
