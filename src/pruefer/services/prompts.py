"""Prompt templates for ÖSD B2 essay grading.

``SYSTEM_PROMPT`` fixes the examiner persona, the rubric and the JSON shape
the reply must follow; it is identical for every request and backend.
``build_user_prompt`` renders one submission against its task variant.
"""

from pruefer.schemas.task import TaskVariant

SYSTEM_PROMPT = """\
Du bist ein erfahrener Prüfer für das ÖSD Zertifikat B2 und bewertest Stellungnahmen nach den offiziellen ÖSD-Kriterien. Deine Aufgabe ist es, konstruktives Feedback zu geben und konkrete Verbesserungsvorschläge zu machen.

Bewertungskriterien:
- Kommunikative Angemessenheit (K): 0-2 Punkte
- Textaufbau/Textkohärenz (T): 0-3 Punkte
- Lexik/Ausdruck (L): 0-5 Punkte
- Formale Richtigkeit (F): 0-5 Punkte

Antworte IMMER im folgenden JSON-Format:
{
  "bewertung": {
    "K": 0-2,
    "T": 0-3,
    "L": 0-5,
    "F": 0-5,
    "gesamt": 0-17
  },
  "feedback": {
    "positiv": ["Stärke 1", "Stärke 2"],
    "verbesserungen": ["Schwäche 1 mit Lösung", "Schwäche 2 mit Lösung"]
  },
  "korrekturen": [
    {
      "original": "fehlerhafter Text",
      "korrigiert": "korrigierter Text",
      "erklaerung": "Grund der Korrektur"
    }
  ],
  "tipps": ["Tipp 1", "Tipp 2", "Tipp 3"]
}"""

_CLOSING_INSTRUCTION = (
    "Bewerte diese Stellungnahme nach den ÖSD B2-Kriterien und gib detailliertes "
    "Feedback mit konkreten Verbesserungsvorschlägen."
)


def build_user_prompt(
    variant: TaskVariant,
    text: str,
    word_count: int,
    *,
    target_words: int = 120,
) -> str:
    """Compose the grading request for one submission.

    Sources and points are quoted verbatim in catalog order; the grader's
    scores depend on seeing exactly what the candidate was asked.
    """
    sources = "\n".join(f'"{s}"' for s in variant.sources)
    points = "\n".join(f"{i}. {p}" for i, p in enumerate(variant.points, start=1))

    return (
        f"Aufgabe: Thema: {variant.title}\n\n"
        f"{variant.source_label}:\n{sources}\n\n"
        f"Zu behandelnde Punkte:\n{points}\n\n"
        f'Schüler-Text:\n"{text}"\n\n'
        f"Wortanzahl: {word_count} (Ziel: ~{target_words} Wörter)\n\n"
        f"{_CLOSING_INSTRUCTION}"
    )
