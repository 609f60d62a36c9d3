#!/usr/bin/env python3
"""
Layout Demos launcher script.

Run this from the project root to start the demo window.
"""

from layout_demos.run_gui import main

if __name__ == '__main__':
    main()
