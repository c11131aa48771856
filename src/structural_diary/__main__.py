"""Allow ``python -m structural_diary``."""

from structural_diary.cli import main

raise SystemExit(main())
