"""Central configuration dataclass for the poly_algebra package.

All tunables live here as a single frozen dataclass so that display,
coefficient promotion and fingerprinting behave identically wherever a
Config is passed.  Operator overloads cannot take extra arguments, so they
read DEFAULT_CONFIG.

Derived quantities (variable names beyond the named ones, the default
coefficient domain object) are computed by helpers to avoid redundancy.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

PACKAGE_LOGGER = "poly_algebra"


@dataclass(frozen=True)
class Config:
    """Frozen settings for display, coefficient promotion and fingerprinting.

    Groups:
        Display:        variable_names, fallback_prefix, power_symbol
        Coefficients:   default_domain
        Fingerprints:   m, eval_low, eval_high, seed
    """
    # --- Display ---
    variable_names: Tuple[str, ...] = ("X", "Y", "Z")
    fallback_prefix: str = "x"   # Var(5) -> "x5" once named variables run out
    power_symbol: str = "^"

    # --- Coefficients ---
    # Domain used when purely untyped expressions need a coefficient type,
    # e.g. X - X or -Y.
    default_domain: str = "ZZ"

    # --- Fingerprints ---
    m: int = 16               # number of evaluation points
    eval_low: int = -3
    eval_high: int = 3
    seed: int = 42

    def __post_init__(self):
        if self.m <= 0:
            raise ValueError(f"m must be positive, got {self.m}")
        if self.eval_low > self.eval_high:
            raise ValueError(
                f"eval_low ({self.eval_low}) exceeds eval_high ({self.eval_high})"
            )

    def variable_name(self, index: int) -> str:
        """Display name of the variable with the given index."""
        if index < len(self.variable_names):
            return self.variable_names[index]
        return f"{self.fallback_prefix}{index}"

    @property
    def domain(self):
        """The CoefficientDomain named by default_domain."""
        from .core.domains import domain_by_name

        return domain_by_name(self.default_domain)


DEFAULT_CONFIG = Config()

# Handler installed by configure_logging, if any.
_stderr_handler: Optional[logging.Handler] = None


def configure_logging(verbosity: int = 0) -> None:
    """Attach a stderr handler to the package logger.

    verbosity: 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG.  Calling again replaces
    the handler installed by the previous call instead of adding another.
    """
    global _stderr_handler

    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    root = logging.getLogger(PACKAGE_LOGGER)
    if _stderr_handler is not None:
        root.removeHandler(_stderr_handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.setLevel(level)
    root.addHandler(handler)
    _stderr_handler = handler
