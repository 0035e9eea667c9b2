"""
Catalogue browser console entry point.

Run `python app.py categories` from the project root; see catalog_browser.cli.
"""

import sys

from catalog_browser.cli import main

if __name__ == "__main__":
    sys.exit(main())
