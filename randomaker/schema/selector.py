"""Distribution selector codes shared by validation and dispatch."""

from __future__ import annotations

from enum import Enum


class Selector(str, Enum):
    """Single-character code naming a distribution.

    The enum is the only list of recognized codes: the argument validator
    accepts exactly these members and the distribution factory registers a
    builder for each of them.
    """

    UNIFORM = "u"
    NORMAL = "n"
    BINOMIAL = "b"
    EXPONENTIAL = "e"
    GAMMA = "g"
    BERNOULLI = "l"
    GEOMETRIC = "o"
    CAUCHY = "c"
    POISSON = "p"
    TRUE_UNIFORM = "t"

    @property
    def flag(self) -> str:
        return f"-{self.value}"

    @property
    def help(self) -> str:
        return _HELP[self]

    @property
    def uses_entropy(self) -> bool:
        return self is Selector.TRUE_UNIFORM

    @classmethod
    def from_flag(cls, token: str) -> "Selector":
        """Resolve a `-x` token; raises ValueError on anything else."""
        if len(token) != 2 or token[0] != "-":
            raise ValueError(f"selector must look like '-x', got {token!r}")
        return cls(token[1])


_HELP = {
    Selector.UNIFORM: "Uniform distribution, ARG1 is range-left, ARG2 is range-right",
    Selector.NORMAL: "Normal distribution, ARG1 is mean, ARG2 is sigma",
    Selector.BINOMIAL: "Binomial distribution, ARG1 is trials, ARG2 is success probability",
    Selector.EXPONENTIAL: "Exponential distribution, ARG1 is lambda, ARG2 is unused",
    Selector.GAMMA: "Gamma distribution, ARG1 is alpha (shape), ARG2 is beta (scale)",
    Selector.BERNOULLI: "Bernoulli distribution (p=0.5), ARG1 and ARG2 are unused",
    Selector.GEOMETRIC: "Geometric distribution (p=0.5), ARG1 and ARG2 are unused",
    Selector.CAUCHY: "Cauchy distribution, ARG1 is median, ARG2 is sigma (scale)",
    Selector.POISSON: "Poisson distribution, ARG1 is mean, ARG2 is unused",
    Selector.TRUE_UNIFORM: "Same as -u, but draws true random numbers from the OS entropy source",
}


__all__ = ["Selector"]
