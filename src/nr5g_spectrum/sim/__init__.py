from nr5g_spectrum.sim.traces import (
    DEFAULT_CENTER_FREQUENCY_GHZ,
    DEFAULT_NUM_POINTS,
    DEFAULT_SEED,
    DEFAULT_SPAN_GHZ,
    SeededRandom,
    TraceConfig,
    generate_spectrum_trace,
    generate_trace_from_config,
)

__all__ = [
    "DEFAULT_CENTER_FREQUENCY_GHZ",
    "DEFAULT_NUM_POINTS",
    "DEFAULT_SEED",
    "DEFAULT_SPAN_GHZ",
    "SeededRandom",
    "TraceConfig",
    "generate_spectrum_trace",
    "generate_trace_from_config",
]
