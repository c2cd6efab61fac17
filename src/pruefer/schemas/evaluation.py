from pydantic import AliasChoices, BaseModel, Field, model_validator


class Bewertung(BaseModel):
    """ÖSD rubric scores: K 0-2, T 0-3, L 0-5, F 0-5, total 0-17."""

    K: float = Field(ge=0, le=2)
    T: float = Field(ge=0, le=3)
    L: float = Field(ge=0, le=5)
    F: float = Field(ge=0, le=5)
    gesamt: float = Field(default=0, ge=0, le=17)

    @model_validator(mode="after")
    def _total_is_sum(self) -> "Bewertung":
        # Models often mis-add the total; the sub-scores win.
        self.gesamt = self.K + self.T + self.L + self.F
        return self


class Feedback(BaseModel):
    positiv: list[str] = Field(default_factory=list)
    verbesserungen: list[str] = Field(default_factory=list)


class Korrektur(BaseModel):
    original: str
    korrigiert: str
    erklaerung: str = ""


class EvaluationResult(BaseModel):
    bewertung: Bewertung
    feedback: Feedback = Field(default_factory=Feedback)
    korrekturen: list[Korrektur] = Field(default_factory=list)
    tipps: list[str] = Field(default_factory=list)


class EvaluationMeta(BaseModel):
    wortanzahl: int
    variante: str
    ai_service: str | None = None  # None when the submission never reached a model
    timestamp: str


class EvaluationResponse(EvaluationResult):
    meta: EvaluationMeta


class EvaluationRequest(BaseModel):
    # Validated by EvaluatorService so that bad input is a 400, not a 422.
    variante: str | None = None
    text: str | None = None
    ai_service: str | None = Field(
        default=None, validation_alias=AliasChoices("ai_service", "aiService")
    )


class ErrorResponse(BaseModel):
    detail: str
    fallback: str | None = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    services: dict[str, bool]
