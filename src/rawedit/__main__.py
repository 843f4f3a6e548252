import sys

from rawedit.app import main

sys.exit(main())
