from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the data structures and factory functions used to communicate
artifacts and execution results between the generation engine and the
interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Artifact:
    """
    One rendered output file, held in memory until it is written or compared.

    Attributes:
        name: File name relative to the output directory.
        content: Full text of the file.
    """
    name: str
    content: str

    def encode(self) -> bytes:
        return self.content.encode("utf-8")


@dataclass(frozen=True)
class VerificationResult:
    """
    Outcome of comparing freshly generated artifacts against committed ones.

    Attributes:
        ok: True when every artifact matched byte for byte.
        checked: Names of all compared artifacts.
        mismatched: Names whose committed content differs.
        missing: Names with no committed counterpart.
        message: Human readable summary.
    """
    ok: bool
    checked: List[str] = field(default_factory=list)
    mismatched: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    message: str = ""


@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete generation or verification run.

    Attributes:
        ok: Flag indicating success.
        error: Descriptive message in case of failure.
        error_kind: Taxonomy identifier of the failure (empty on success).
        input_file: Translation document the key schema was read from.
        output_path: Directory of the committed artifacts.
        output_mode: Output mode used for rendering.
        no_emit: Whether the run only verified.
        key_count: Number of leaf keys discovered.
        artifacts: Paths written (generation) or names compared (verification).
        formatted: Whether the external formatter was applied.
        verification: Verification outcome when `no_emit` is set.
        summary: Additional execution metadata.
    """
    ok: bool
    error: str

    input_file: str
    output_path: str
    output_mode: str
    no_emit: bool

    key_count: int = 0
    artifacts: List[str] = field(default_factory=list)
    formatted: bool = False
    verification: Optional[VerificationResult] = None

    summary: Dict[str, Any] = field(default_factory=dict)
    error_kind: str = ""

    @property
    def drift_detected(self) -> bool:
        return self.verification is not None and not self.verification.ok

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        error_kind: str,
        cfg: Dict[str, Any],
        input_file: str = "",
        verification: Optional[VerificationResult] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        error_kind: Taxonomy identifier of the failure.
        cfg: Configuration values known at the time of failure.
        input_file: Translation document, if one was selected.
        verification: Verification outcome for drift failures.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        input_file=input_file,
        output_path=cfg.get("output_path") or "",
        output_mode=cfg.get("output_mode") or "",
        no_emit=bool(cfg.get("no_emit", False)),
        verification=verification,
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        input_file: str,
        key_count: int,
        artifacts: List[str],
        formatted: bool = False,
        verification: Optional[VerificationResult] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        cfg: Final configuration used during execution.
        input_file: Translation document the keys were read from.
        key_count: Number of leaf keys emitted.
        artifacts: Written paths or compared artifact names.
        formatted: Whether the formatter ran.
        verification: Verification outcome in no-emit mode.
        summary_extra: Final execution metadata.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        input_file=input_file,
        output_path=cfg.get("output_path") or "",
        output_mode=cfg.get("output_mode") or "",
        no_emit=bool(cfg.get("no_emit", False)),
        key_count=key_count,
        artifacts=list(artifacts),
        formatted=formatted,
        verification=verification,
        summary=summary_extra or {},
    )
