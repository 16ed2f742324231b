"""Composite trace-processing helpers."""

from nr5g_spectrum.pipeline.process import SpectrumSummary, process_spectrum

__all__ = ["SpectrumSummary", "process_spectrum"]
