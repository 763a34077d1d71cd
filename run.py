"""
Entry Point Script (Bootstrap)
==============================
Runs the boundarypaths command-line interface from a source checkout.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It modifies 'sys.path' to ensure Python can resolve imports like
   'from boundarypaths.model...' without installing the package.

Usage:
    $ python run.py assets/paths/m.paths --dim 2 --dump
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from boundarypaths.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
