"""Allow running as `python -m sfcurves`."""

from sfcurves.cli import main

main()
