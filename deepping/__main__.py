import sys

from deepping.cli import main

sys.exit(main())
