import sys

from timeconvert.cli import main

sys.exit(main())
