import sys

from molbridge.cli.app import main

sys.exit(main())
