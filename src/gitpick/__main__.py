import sys

from gitpick.cli import main

sys.exit(main())
