import sys

from tripmap.visualizer2d.cli import main

sys.exit(main())
