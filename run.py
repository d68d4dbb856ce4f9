"""
Entry Point Script (Bootstrap)
==============================
Runs the demo window straight from a source checkout.

It sits outside 'src' and puts 'src' on sys.path so that imports like
'from statelink.state import State' resolve without installing the package.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from statelink.demo import main

if __name__ == "__main__":
    main()
