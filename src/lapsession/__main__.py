"""Allow ``python -m lapsession``."""

from lapsession.cli import main

raise SystemExit(main())
