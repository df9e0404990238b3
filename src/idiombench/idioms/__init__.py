"""Built-in idiom suites.

Each module registers one suite with :func:`idiombench.bench.catalog.suite`.
The cases within a suite do equivalent work in different styles, so
their ratios show what the style itself costs.
"""

from idiombench.idioms import (  # noqa: F401
    exceptions,
    file_reading,
    calls,
    construction,
    allocation,
    growth,
    iteration,
)
