"""
Allow running the package directly: python -m julia_explorer
"""
from .app import main

if __name__ == "__main__":
    main()
