import sys

from sqlpeek.cli import main

sys.exit(main())
