"""Entry point for ``python -m torchfir.report``."""

from ._cli import main

raise SystemExit(main())
