from __future__ import annotations

from collections.abc import Iterable


def clean_sub_breed_names(names: Iterable[str] | None) -> list[str] | None:
    """Strip whitespace and drop blank entries, keeping order.

    Duplicates and letter case are kept as given. ``None`` stays ``None`` so
    callers can tell "not provided" from "provided but empty".
    """
    if names is None:
        return None
    return [name.strip() for name in names if name and name.strip()]
