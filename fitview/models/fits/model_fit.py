"""Model fit assessment models."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

_NUMERIC_FIELDS = (
    "score",
    "estimated_tps",
    "utilization_pct",
    "context_length",
    "memory_required_gb",
    "memory_available_gb",
    "score_memory",
    "score_speed",
    "score_quality",
    "score_context",
)

_TEXT_FIELDS = (
    "provider",
    "params",
    "fit_level",
    "fit_emoji",
    "best_quant",
    "run_mode",
    "category",
    "use_case",
)


class ModelFitRecord(BaseModel):
    """One model's compatibility assessment against the local system.

    Produced by the external scoring backend and never mutated here. ``name``
    is the row and selection key; it may carry a provider prefix such as
    ``"org/model"``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    provider: str = ""
    params: str = ""
    score: float = 0.0
    fit_level: str = ""
    fit_emoji: str = ""
    estimated_tps: float = 0.0
    best_quant: str = ""
    run_mode: str = ""
    utilization_pct: float = 0.0
    context_length: int = 0
    installed: bool = False
    memory_required_gb: float = 0.0
    memory_available_gb: float = 0.0
    score_memory: float = Field(
        default=0.0,
        validation_alias=AliasChoices("score_memory", "score_fit"),
    )
    score_speed: float = 0.0
    score_quality: float = 0.0
    score_context: float = 0.0
    category: str = ""
    use_case: str = ""
    notes: tuple[str, ...] = ()

    @field_validator(*_NUMERIC_FIELDS, mode="before")
    @classmethod
    def _null_numbers_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _null_text_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("notes", mode="before")
    @classmethod
    def _null_notes_to_empty(cls, value: Any) -> Any:
        return () if value is None else value
