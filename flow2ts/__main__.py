"""
So that `python -m flow2ts annotations.json` works the same as the console script.
"""
from .cmdline import main

main()
