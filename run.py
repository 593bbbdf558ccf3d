"""
Entry Point Script (Bootstrap)
==============================
Development runner placed outside the 'src' package.

It puts 'src' on sys.path so 'barchartvisual' imports resolve without an
editable install.

Usage:
    $ python run.py [data.json|data.csv]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from barchartvisual.main import main

if __name__ == "__main__":
    sys.exit(main())
