"""Console script entry point with production wiring.

Backs the ``hello-json`` command installed by pip. Sits at package level,
outside the adapters, so it can hand the composition root to the CLI
without the adapters importing composition.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the greeting command over ``sys.argv`` with production services.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
