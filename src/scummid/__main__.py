import sys

from scummid.cli import main

sys.exit(main())
