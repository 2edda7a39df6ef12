"""Allow ``python -m l10ntools.dates``."""

from l10ntools.dates.cli import main

raise SystemExit(main())
