"""Run the clientbound CLI with ``python -m clientbound.cli``."""

from clientbound.cli.main import main

raise SystemExit(main())
