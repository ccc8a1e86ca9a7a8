"""``python -m session_timing`` – run the demo scenarios."""
import sys

from session_timing.demo import main

if __name__ == "__main__":
    sys.exit(main())
