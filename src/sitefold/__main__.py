import sys

from sitefold.cli import main

sys.exit(main())
