import sys

from vtv.cli import main

sys.exit(main())
