import sys

from tick_graph.cli import main

sys.exit(main())
