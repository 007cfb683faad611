"""
Run with: python -m wordsphere
"""
import sys

from wordsphere.main import main

if __name__ == "__main__":
    sys.exit(main())
