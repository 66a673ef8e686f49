"""Entry point for ``python -m translation_catalog``."""
from translation_catalog.main import main

main()
