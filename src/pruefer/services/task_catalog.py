"""ÖSD Zertifikat B2 writing tasks (Stellungnahme).

The catalog is built once at startup and only read afterwards.
"""

from collections.abc import Iterable, Iterator

from pruefer.schemas.task import TaskVariant

_COMMON_POINTS = (
    "Begründen Sie Ihre persönliche Meinung.",
    "Beschreiben Sie eigene Erfahrungen (oder Erfahrungen von Freunden) zum Thema.",
)

DEFAULT_VARIANTS = (
    TaskVariant(
        id="A",
        title="Kind und Beruf",
        source_label="Aussagen",
        sources=(
            "Job und Kind geht nicht. Immer mehr Frauen leiden unter der "
            "Doppelbelastung und dem großen Druck.",
            "Ich bin für mehr Fortbildung und Berufskurse während der Babypause: "
            "Nur so bleibt man auf dem Laufenden.",
            "Für den Wiedereinstieg ins Berufsleben brauchen Mütter und Väter "
            "bessere Chancen und flexible Arbeitszeiten.",
        ),
        points=(
            "Wie denken Sie über diese Äußerungen?",
            *_COMMON_POINTS,
            "Wie ist die Situation von berufstätigen Eltern in Ihrem Land?",
        ),
    ),
    TaskVariant(
        id="B",
        title="Zusammenleben – ja oder nein?",
        source_label="Schlagzeilen",
        sources=(
            "Die traditionelle Familie verliert an Wert: Eine Umfrage unter jungen "
            "Leuten zeigt, dass viele nicht mehr heiraten möchten, sondern in einer "
            "offenen Beziehung leben wollen.",
            "Scheidungsrate steigt: Immer mehr verheiratete Paare trennen sich. "
            "Warum funktioniert das Modell Ehe nicht mehr?",
            "GLÜCKLICHE SINGLES: Junge Leute immer mehr auf dem Ego-Trip: "
            "Allein leben ist schöner und einfacher!",
        ),
        points=(
            "Wie denken Sie über diese Schlagzeilen?",
            *_COMMON_POINTS,
            "Wie ist die Situation in Ihrem Land?",
        ),
    ),
)


class TaskCatalog:
    """Read-only lookup of task variants by identifier."""

    def __init__(self, variants: Iterable[TaskVariant]) -> None:
        self._variants: dict[str, TaskVariant] = {}
        for variant in variants:
            if variant.id in self._variants:
                raise ValueError(f"Duplicate task variant: {variant.id}")
            self._variants[variant.id] = variant

    @classmethod
    def default(cls) -> "TaskCatalog":
        return cls(DEFAULT_VARIANTS)

    def get(self, variant_id: str | None) -> TaskVariant | None:
        if variant_id is None:
            return None
        return self._variants.get(variant_id)

    def ids(self) -> list[str]:
        return list(self._variants)

    def variants(self) -> list[TaskVariant]:
        return list(self._variants.values())

    def __contains__(self, variant_id: object) -> bool:
        return variant_id in self._variants

    def __iter__(self) -> Iterator[TaskVariant]:
        return iter(self._variants.values())

    def __len__(self) -> int:
        return len(self._variants)
