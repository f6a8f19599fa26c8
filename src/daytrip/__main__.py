import sys

from daytrip.cli import main

sys.exit(main())
