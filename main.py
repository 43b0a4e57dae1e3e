"""
Cubemap viewer.

Loads data/{right,left,up,down,back,front}.tex into one cubemap and maps it
onto a sphere around the camera. Exits with status 1 if any face fails.

Expected keys:
    - Left mouse drag: look around
    - ESC: quit
"""

import sys

from cubetex.viewer.app import run

if __name__ == "__main__":
    sys.exit(run())
