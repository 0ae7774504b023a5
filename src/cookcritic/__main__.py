"""Allow ``python -m cookcritic``."""

from __future__ import annotations

from cookcritic.cli.main import main

raise SystemExit(main())
