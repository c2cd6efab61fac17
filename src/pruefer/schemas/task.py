from pydantic import BaseModel, ConfigDict


class TaskVariant(BaseModel):
    """One ÖSD B2 writing task: quoted sources plus the points to address."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    source_label: str
    sources: tuple[str, ...]
    points: tuple[str, ...]
