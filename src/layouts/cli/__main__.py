import sys

from layouts.cli._dispatcher import main

sys.exit(main())
