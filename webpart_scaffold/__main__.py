import sys

from webpart_scaffold.cli import main

sys.exit(main())
