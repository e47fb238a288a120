"""``python -m vanityurls``."""

from vanityurls.cli import main

main()
