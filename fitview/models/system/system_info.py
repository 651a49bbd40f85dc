"""System capability models."""

from pydantic import BaseModel, ConfigDict


class SystemInfoRecord(BaseModel):
    """Hardware summary reported by the backend's capability probe."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    cpu: str = "Unknown CPU"
    cores: int = 0
    ram_gb: float = 0.0
    gpu: str = "None"
    gpu_backend: str | None = None
    vram_gb: float | None = None  # None or 0 means no dedicated VRAM
    unified_memory: bool = False
    ollama_available: bool = False
    ollama_installed_count: int = 0

    @property
    def has_vram(self) -> bool:
        """Whether a non-zero VRAM figure was reported."""
        return bool(self.vram_gb)
