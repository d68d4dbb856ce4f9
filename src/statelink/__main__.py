"""Launches the demo window."""
from statelink.demo import main

if __name__ == "__main__":
    main()
