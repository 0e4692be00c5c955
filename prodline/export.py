"""Reports and validation for sigmoid performance data."""

from __future__ import annotations

import os
from pathlib import Path

from .performance import PerformancePoint, SigmoidPerformance


class ValidationError(ValueError):
    """Raised when user-supplied input fails validation."""


def classify_performance(value: float) -> str:
    """Name the band a performance percentage falls in."""
    if value < 20:
        return "Muy Bajo"
    if value < 40:
        return "Bajo"
    if value < 60:
        return "Moderado"
    if value < 80:
        return "Alto"
    return "Muy Alto"


def format_parameters(machine: str, k: float, x0: float) -> str:
    """The three-line header naming the machine and the curve parameters."""
    return (
        f"Máquina: {machine}\n"
        f"Tasa de Crecimiento (k): {k:.3f}\n"
        f"Punto de Inflexión (x₀): {x0:.1f}"
    )


def csv_header() -> str:
    """Column names of the CSV export."""
    return "Hora Operativa,Rendimiento (%),Estado"


def data_line(point: PerformancePoint) -> str:
    """One CSV row for a point."""
    return f"{point.x:.1f},{point.y:.2f},{classify_performance(point.y)}"


def _join(lines: list[str]) -> str:
    return "".join(line + "\n" for line in lines)


def export_csv(model: SigmoidPerformance, machine: str, k: float, x0: float) -> str:
    """The model's points as CSV, preceded by the parameter header."""
    lines = [format_parameters(machine, k, x0), "", csv_header()]
    lines.extend(data_line(p) for p in model.points)
    return _join(lines)


def export_text(model: SigmoidPerformance, machine: str, k: float, x0: float) -> str:
    """A plain-text report of the model's points."""
    lines = [
        "REPORTE DE RENDIMIENTO SIGMOIDE",
        "================================",
        format_parameters(machine, k, x0),
        "",
        "DATOS DE RENDIMIENTO:",
        "---------------------",
    ]
    lines.extend(f"  {data_line(p)} -> {classify_performance(p.y)}" for p in model.points)
    return _join(lines)


def save_file(content: str, path: str | os.PathLike[str]) -> Path:
    """Write ``content`` as UTF-8 with a byte-order mark; return the path."""
    target = Path(path)
    target.write_text(content, encoding="utf-8-sig")
    return target


def validate_sigmoid_parameters(k: float, x0: float) -> None:
    """Raise ValidationError unless both parameters are positive."""
    if k <= 0 or x0 <= 0:
        raise ValidationError("Los valores de k y x₀ deben ser mayores que cero.")


def validate_not_blank(text: str | None, field_name: str) -> str:
    """Return ``text``, or raise ValidationError when it is empty or whitespace."""
    if text is None or not text.strip():
        raise ValidationError(f"{field_name} no puede estar vacío.")
    return text


def parse_double(text: str | None) -> float:
    """Parse a decimal number, raising ValidationError when it is not one."""
    if text is None or "_" in text:
        raise ValidationError(f"Valor numérico no válido: {text!r}")
    try:
        return float(text.strip())
    except ValueError:
        raise ValidationError(f"Valor numérico no válido: {text!r}") from None


def format_double(value: float, decimals: int) -> str:
    """Fixed-point text of ``value`` with ``decimals`` digits after the point."""
    if decimals < 0:
        raise ValueError("decimals must not be negative")
    return f"{value:.{decimals}f}"