from randomaker.sampling.generator import generate_samples, time_seeded_generator
from randomaker.sampling.output import format_samples

__all__ = ["format_samples", "generate_samples", "time_seeded_generator"]
